"""
API Routers - Organized endpoint handlers for the AssetVerse API.

Each router handles a specific domain:
- requests: Asset request submission, HR queue and approve/reject
- affiliations: HR team membership
"""
