"""Clients for the Open Build Service and Repology APIs."""

from osutil.remote.obs import ObsClient
from osutil.remote.repology import RepologyClient, normalize_name

__all__ = ["ObsClient", "RepologyClient", "normalize_name"]
