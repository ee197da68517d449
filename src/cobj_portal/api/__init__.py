"""
cobj_portal.api

Web layer for the custom object portal.

Responsibilities:
- FastAPI app factory, router modules and the process entry point.
- API-layer dependency wiring (settings, CRM client, templates).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The web layer stays thin: parse the request, call the CRM client, render a view.
