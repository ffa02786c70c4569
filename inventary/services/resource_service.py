"""
resource_service.py - Resource service layer
Single responsibility: list/get/create/update/delete rows for a registered resource.
"""
import logging
import mimetypes
import os
from contextlib import ExitStack

from pydantic import ValidationError

from inventary.config import FILTER_OPTIONS_PATH, SIZING_GUIDE_PATH
from inventary.domain.envelopes import ItemEnvelope, ListEnvelope
from inventary.domain.resources import ResourceSpec
from inventary.domain.schemas import FormSchema
from inventary.services.api_client import ApiClient, get_client
from inventary.services.errors import ApiError, EnvelopeError
from inventary.state.query_builder import build_list_url

logger = logging.getLogger(__name__)


def list_rows(resource: ResourceSpec, query_string: str, client: ApiClient | None = None) -> ListEnvelope:
    client = client or get_client()
    payload = client.get(build_list_url(resource.list_path, query_string))
    try:
        return ListEnvelope.parse(payload, resource.collection_key)
    except ValidationError as e:
        raise EnvelopeError(f"Unexpected {resource.key} list response") from e


def get_row(resource: ResourceSpec, row_id, client: ApiClient | None = None) -> dict:
    client = client or get_client()
    payload = client.get(resource.item_url(row_id))
    try:
        return ItemEnvelope.parse(payload).data
    except ValidationError as e:
        raise EnvelopeError(f"Unexpected {resource.key} item response") from e


def _send(
    client: ApiClient,
    method: str,
    path: str,
    form: FormSchema,
    multipart: bool,
    files: dict[str, list[str]] | None,
):
    if not multipart:
        return client.request(method, path, json=form.to_json())

    with ExitStack() as stack:
        upload = []
        for field_name, paths in (files or {}).items():
            for path_ in paths:
                handle = stack.enter_context(open(path_, "rb"))
                mime = mimetypes.guess_type(path_)[0] or "application/octet-stream"
                upload.append((field_name, (os.path.basename(path_), handle, mime)))
        return client.request(method, path, data=form.to_form_data(), files=upload or None)


def create_row(
    resource: ResourceSpec,
    form: FormSchema,
    files: dict[str, list[str]] | None = None,
    client: ApiClient | None = None,
):
    client = client or get_client()
    logger.info("Creating %s", resource.key)
    return _send(client, "POST", resource.item_path, form, resource.multipart, files)


def update_row(
    resource: ResourceSpec,
    row_id,
    form: FormSchema,
    files: dict[str, list[str]] | None = None,
    client: ApiClient | None = None,
):
    client = client or get_client()
    logger.info("Updating %s %s", resource.key, row_id)
    multipart = resource.multipart and not resource.json_on_update
    return _send(client, "PUT", resource.item_url(row_id), form, multipart, files)


def delete_row(resource: ResourceSpec, row_id, client: ApiClient | None = None):
    client = client or get_client()
    logger.info("Deleting %s %s", resource.key, row_id)
    return client.delete(resource.delete_url(row_id))


def fetch_filter_options(client: ApiClient | None = None) -> dict[str, list[str]]:
    """field -> selectable values for the product filter dropdowns."""
    client = client or get_client()
    payload = client.get(FILTER_OPTIONS_PATH)
    fields = (((payload or {}).get("data") or {}).get("filter_options") or {}).get("fields") or {}
    options: dict[str, list[str]] = {}
    for name, spec in fields.items():
        values = (spec or {}).get("values") or []
        options[name] = [str(v.get("value", v.get("label", ""))) if isinstance(v, dict) else str(v) for v in values]
    return options


def upload_sizing_guide(path: str, client: ApiClient | None = None):
    client = client or get_client()
    with open(path, "rb") as handle:
        mime = mimetypes.guess_type(path)[0] or "application/octet-stream"
        return client.post(
            SIZING_GUIDE_PATH,
            files={"image": (os.path.basename(path), handle, mime)},
        )


def delete_sizing_guide(client: ApiClient | None = None):
    client = client or get_client()
    return client.delete(SIZING_GUIDE_PATH)


def error_text(exc: Exception) -> str:
    """User-facing message for a failed mutation."""
    if isinstance(exc, ApiError):
        return exc.message
    return str(exc) or exc.__class__.__name__
