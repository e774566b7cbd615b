import pytest

from anilist_querybuilder.api import MediaApi


class RecordingTransport:
    def __init__(self):
        self.requests = []

    def query(self, request):
        self.requests.append(request)
        return {"operation": request.operation}


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def media_api(transport):
    return MediaApi(transport)
