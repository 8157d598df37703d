from pulumi_xyz.provider.api import send_request
from pulumi_xyz.provider.provider import XyzResourceProvider

__all__ = ["send_request", "XyzResourceProvider"]
