from typing import Optional
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel
from sqlmodel import Session
from hobbies.core.db import get_session
from hobbies.core.errors import ValidationError, StorageConstraintError
from hobbies.core.flash import flash, pop_flashed
from hobbies.core.templates import templates
from hobbies.services import people_store
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

NAME_REQUIRED = "You must enter a name."
HOBBY_REQUIRED = "You must enter a hobby."
SAVED = "The person was saved successfully!"

class PersonSubmission(BaseModel):
    name: str = ""
    hobby: str = ""

    def validation_message(self) -> Optional[str]:
        """rejection text for missing fields, None when both are filled in"""
        missing = []
        if not self.name:
            missing.append(NAME_REQUIRED)
        if not self.hobby:
            missing.append(HOBBY_REQUIRED)
        return "\n".join(missing) or None

    def validate_required(self):
        message = self.validation_message()
        if message:
            raise ValidationError(message)

def person_form(name: str = Form(""), hobby: str = Form("")) -> PersonSubmission:
    return PersonSubmission(name=name, hobby=hobby)

def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)

@router.get("/")
def show_form(request: Request):
    """entry form, with any errors left over from the last submission"""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"messages": pop_flashed(request, "danger")},
    )

@router.get("/show")
def list_people(request: Request, session: Session = Depends(get_session)):
    people = people_store.list_all(session)
    return templates.TemplateResponse(
        request,
        "show.html",
        {"messages": pop_flashed(request, "success"), "people": people},
    )

@router.post("/")
def submit_person(
    request: Request,
    submission: PersonSubmission = Depends(person_form),
    session: Session = Depends(get_session),
):
    try:
        submission.validate_required()
    except ValidationError as e:
        logger.info(f"submission rejected: {str(e)!r}")
        flash(request, "danger", str(e))
        return _redirect("/")

    try:
        people_store.insert(session, submission.name, submission.hobby)
    except StorageConstraintError as e:
        flash(request, "danger", e.detail)
        return _redirect("/")

    flash(request, "success", SAVED)
    return _redirect("/show")
