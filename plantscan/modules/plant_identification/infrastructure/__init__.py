"""
Plant identification infrastructure: external service clients and the
preview handle store.
"""
