from maradocs.jobs.job_client import JobClient
from maradocs.models.data import DataMediaTypeRequest, DataMediaTypeResponse


class DataEndpoint:
    """Job-backed operations on uploaded, not yet validated files."""

    def __init__(self, jobs: JobClient) -> None:
        self._jobs = jobs

    def mime_type(self, request: DataMediaTypeRequest) -> DataMediaTypeResponse:
        """Detect the media type of an uploaded file."""
        return self._jobs.run("/data/mime_type", request, DataMediaTypeResponse)
