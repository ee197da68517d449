"""
cobj_portal.api.routers

Route modules mounted by `cobj_portal.api.app.create_app`.
"""

# Package marker.
