# 📄 File: plantscan/modules/plant_identification/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups everything that turns a plant photo into a name and a care guide, in Hebrew or Arabic.
# 🧪 Purpose (Technical Summary):
# Package initialization for the plant identification module (domain, application,
# infrastructure, presentation layers).
# 🔗 Dependencies:
# FastAPI, aiohttp, pydantic, Pillow
# 🔄 Connected Modules / Calls From:
# plantscan.main (lifespan wiring), plantscan.api.v1.router

"""
Plant Identification Module

- Identification: photo -> ranked species suggestions (Plant.id)
- Enrichment: care profile (Perenual) and encyclopedia summary (Wikipedia)
- Scan controller: the screen state machine and its localized snapshot

Architecture follows the same layering as the rest of the app:
- Domain: suggestions, care profiles, fetch results, scan states
- Application: scan controller, enrichment service, view DTOs
- Infrastructure: service clients, geolocation probe, preview store
- Presentation: JSON endpoints and the HTML page
"""
