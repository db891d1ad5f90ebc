"""Product site shell component."""

from practicals.components.site.component import SITE_VERSION, SiteStatus, get_status

__all__ = ["get_status", "SiteStatus", "SITE_VERSION"]
