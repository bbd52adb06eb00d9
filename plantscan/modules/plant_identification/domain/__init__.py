"""
Plant identification domain layer: suggestions, care profiles, encyclopedia
summaries, geolocation hints and the scan lifecycle states.
"""
