"""
cobj_portal.crm

Boundary to the remote CRM (HubSpot CRM v3 objects API).

Responsibilities:
- Build the long-lived outbound HTTP client.
- Wrap the search/create endpoints for the configured custom object type.
- Map remote JSON into the `Record` view model.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing outside this package should know HubSpot URL shapes or payload layout.
