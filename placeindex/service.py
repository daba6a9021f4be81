import boto3
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound

from placeindex.config import Settings
from placeindex.exceptions import BackendError, ConfigurationError


def strip_metadata(resp: dict) -> dict:
    return {k: v for k, v in resp.items() if k != "ResponseMetadata"}


class PlaceIndexService:
    """Thin wrapper around the boto3 ``location`` client.

    Each method takes the kwargs built in ``placeindex.builders`` and returns the
    response without ``ResponseMetadata``. Failures are logged and re-raised as
    ``BackendError``; nothing is retried.
    """

    def __init__(self, settings: Settings, logger, client=None):
        self.settings = settings
        self.logger = logger
        if client is None:
            try:
                session = boto3.Session(profile_name=settings.profile, region_name=settings.region)
            except ProfileNotFound as e:
                raise ConfigurationError(str(e)) from e
            client = session.client("location")
        self.client = client

    def _call(self, operation: str, **kwargs) -> dict:
        self.logger.debug(f"Calling {operation}", extra={"operation": operation, "request": kwargs})
        try:
            resp = getattr(self.client, operation)(**kwargs)
        except (ClientError, BotoCoreError) as e:
            self.logger.debug(f"Error calling Amazon Location: {operation}", extra={"operation": operation, "error": str(e)})
            raise BackendError(operation, e) from e
        return strip_metadata(resp)

    def create_place_index(self, args: dict) -> dict:
        return self._call("create_place_index", **args)

    def delete_place_index(self, args: dict) -> dict:
        return self._call("delete_place_index", **args)

    def describe_place_index(self, args: dict) -> dict:
        return self._call("describe_place_index", **args)

    def list_place_indexes(self, args: dict) -> dict:
        entries = []
        try:
            paginator = self.client.get_paginator("list_place_indexes")
            for page in paginator.paginate(**args):
                entries.extend(page.get("Entries", []))
        except (ClientError, BotoCoreError) as e:
            self.logger.debug("Error calling Amazon Location: list_place_indexes", extra={"operation": "list_place_indexes", "error": str(e)})
            raise BackendError("list_place_indexes", e) from e
        return {"Entries": entries}

    def search_place_index_for_position(self, args: dict) -> dict:
        return self._call("search_place_index_for_position", **args)

    def search_place_index_for_suggestions(self, args: dict) -> dict:
        return self._call("search_place_index_for_suggestions", **args)

    def search_place_index_for_text(self, args: dict) -> dict:
        return self._call("search_place_index_for_text", **args)

    def update_place_index(self, args: dict) -> dict:
        return self._call("update_place_index", **args)
