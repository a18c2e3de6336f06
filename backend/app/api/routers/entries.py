"""HTML endpoints for listing, adding, editing, and deleting fitness entries."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Mapping, Optional

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Request,
    Response,
    status,
)
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ...api.dependencies import (
    get_activities,
    get_entries_repository,
    get_templates,
)
from ...domain.entries import (
    EntriesRepository,
    Entry,
    EntryFormResult,
    EntryNotFoundError,
    ValidationErrors,
    bind_entry_form,
    compute_statistics,
    form_values,
)
from ...domain.entries.activities import ActivitiesLookup
from ...infra.logging import get_logger
from ...infra.metrics import get_metrics_client

router = APIRouter(prefix="/Entries", tags=["entries"])
logger = get_logger(__name__)
metrics = get_metrics_client()

LIST_ROUTE_NAME = "list_entries"
ADD_FORM_ACTION = "/Entries/Add"
EDIT_FORM_ACTION = "/Entries/Edit"


async def get_posted_form(request: Request) -> Dict[str, str]:
    """Read the urlencoded form body into a plain mapping."""

    form = await request.form()
    return {key: str(value) for key, value in form.items()}


@router.get("", response_class=HTMLResponse, name=LIST_ROUTE_NAME)
def list_entries(
    request: Request,
    repository: EntriesRepository = Depends(get_entries_repository),
    activities: ActivitiesLookup = Depends(get_activities),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    entries = repository.get_entries()
    statistics = compute_statistics(entries)
    metrics.increment("entries_list_http_total")
    rows = [
        {"entry": entry, "activity": activities.get(entry.activity_id)}
        for entry in sorted(entries, key=lambda item: item.date, reverse=True)
    ]
    return templates.TemplateResponse(
        request,
        "entries/index.html",
        {
            "entries": entries,
            "rows": rows,
            "total_activity": statistics.total_activity,
            "number_of_active_days": statistics.number_of_active_days,
            "average_daily_activity": statistics.average_daily_activity,
        },
    )


@router.get("/Add", response_class=HTMLResponse)
def add_entry_form(
    request: Request,
    activities: ActivitiesLookup = Depends(get_activities),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    entry = Entry(date=date.today())
    return _render_form(
        request,
        templates,
        activities,
        "entries/add.html",
        form_action=ADD_FORM_ACTION,
        entry=entry,
        values=form_values(entry),
        errors=ValidationErrors(),
    )


@router.post("/Add", response_class=HTMLResponse)
def add_entry(
    request: Request,
    form: Dict[str, str] = Depends(get_posted_form),
    repository: EntriesRepository = Depends(get_entries_repository),
    activities: ActivitiesLookup = Depends(get_activities),
    templates: Jinja2Templates = Depends(get_templates),
) -> Response:
    result = bind_entry_form(form, ignore_id=True, activities=activities)
    if result.is_valid and result.entry is not None:
        stored = repository.add_entry(result.entry)
        metrics.increment("entries_added_total")
        logger.info("entry_add_submitted", extra={"entry_id": stored.id})
        return _redirect_to_list(request)

    _record_validation_failure("add", result)
    return _render_form(
        request,
        templates,
        activities,
        "entries/add.html",
        form_action=ADD_FORM_ACTION,
        entry=result.entry,
        values=result.values,
        errors=result.errors,
    )


@router.get("/Edit", response_class=HTMLResponse)
@router.get("/Edit/{entry_id}", response_class=HTMLResponse)
def edit_entry_form(
    request: Request,
    entry_id: Optional[str] = None,
    query_id: Optional[str] = Query(None, alias="id"),
    repository: EntriesRepository = Depends(get_entries_repository),
    activities: ActivitiesLookup = Depends(get_activities),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    resolved_id = _require_id(entry_id if entry_id is not None else query_id)
    entry = _get_or_404(repository, resolved_id)
    return _render_form(
        request,
        templates,
        activities,
        "entries/edit.html",
        form_action=EDIT_FORM_ACTION,
        entry=entry,
        values=form_values(entry),
        errors=ValidationErrors(),
    )


@router.post("/Edit", response_class=HTMLResponse)
@router.post("/Edit/{entry_id}", response_class=HTMLResponse)
def edit_entry(
    request: Request,
    entry_id: Optional[str] = None,
    form: Dict[str, str] = Depends(get_posted_form),
    repository: EntriesRepository = Depends(get_entries_repository),
    activities: ActivitiesLookup = Depends(get_activities),
    templates: Jinja2Templates = Depends(get_templates),
) -> Response:
    if not (form.get("Id") or "").strip() and entry_id is not None:
        form = {**form, "Id": entry_id}
    result = bind_entry_form(form, activities=activities)
    if result.is_valid and result.entry is not None:
        try:
            repository.update_entry(result.entry)
        except EntryNotFoundError as exc:
            metrics.increment("entries_update_not_found_total")
            raise _not_found(exc.entry_id) from exc
        metrics.increment("entries_updated_total")
        logger.info("entry_edit_submitted", extra={"entry_id": result.entry.id})
        return _redirect_to_list(request)

    _record_validation_failure("edit", result)
    return _render_form(
        request,
        templates,
        activities,
        "entries/edit.html",
        form_action=EDIT_FORM_ACTION,
        entry=result.entry,
        values=result.values,
        errors=result.errors,
    )


@router.get("/Delete", response_class=HTMLResponse)
@router.get("/Delete/{entry_id}", response_class=HTMLResponse)
def delete_entry_confirmation(
    request: Request,
    entry_id: Optional[str] = None,
    query_id: Optional[str] = Query(None, alias="id"),
    repository: EntriesRepository = Depends(get_entries_repository),
    activities: ActivitiesLookup = Depends(get_activities),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    resolved_id = _require_id(entry_id if entry_id is not None else query_id)
    entry = _get_or_404(repository, resolved_id)
    return templates.TemplateResponse(
        request,
        "entries/delete.html",
        {"entry": entry, "activity": activities.get(entry.activity_id)},
    )


@router.post("/Delete/{entry_id}")
def delete_entry(
    request: Request,
    entry_id: str,
    repository: EntriesRepository = Depends(get_entries_repository),
) -> RedirectResponse:
    resolved_id = _require_id(entry_id)
    removed = repository.delete_entry(resolved_id)
    metrics.increment(
        "entries_deleted_total" if removed else "entries_delete_noop_total"
    )
    return _redirect_to_list(request)


def _render_form(
    request: Request,
    templates: Jinja2Templates,
    activities: ActivitiesLookup,
    template_name: str,
    *,
    form_action: str,
    entry: Entry | None,
    values: Mapping[str, str],
    errors: ValidationErrors,
) -> HTMLResponse:
    context: Dict[str, Any] = {
        "entry": entry,
        "form_action": form_action,
        "values": dict(values),
        "errors": errors.fields,
        "activities": activities.list_activities(),
    }
    return templates.TemplateResponse(request, template_name, context)


def _redirect_to_list(request: Request) -> RedirectResponse:
    # Post/Redirect/Get
    return RedirectResponse(
        url=str(request.url_for(LIST_ROUTE_NAME).path),
        status_code=status.HTTP_302_FOUND,
    )


def _require_id(raw_id: Optional[str]) -> int:
    if raw_id is None or not raw_id.strip():
        raise _bad_request("An entry id is required")
    try:
        return int(raw_id.strip())
    except ValueError as exc:
        raise _bad_request(f"'{raw_id}' is not a valid entry id") from exc


def _get_or_404(repository: EntriesRepository, entry_id: int) -> Entry:
    entry = repository.get_entry(entry_id)
    if entry is None:
        raise _not_found(entry_id)
    return entry


def _record_validation_failure(action: str, result: EntryFormResult) -> None:
    metrics.increment("entries_validation_failed_total")
    logger.info(
        "entry_validation_failed",
        extra={"action": action, "fields": sorted(result.errors.fields)},
    )


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def _not_found(entry_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Entry {entry_id} not found",
    )
