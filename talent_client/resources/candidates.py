"""
Candidates resource.
"""

from talent_client.core.http import ApiTransport
from talent_client.resources.base import BaseResource


class CandidateResource(BaseResource):
    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/candidates")
