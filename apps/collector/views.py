import logging
from typing import Optional

from fastapi import Depends, File, Form, HTTPException, Response, UploadFile
from sqlalchemy.orm import Session

from apps.collector.schema import Submission
from apps.collector.services import BackendUnavailable, StatementFailed, submit_playthrough, get_playthrough
from config.db import get_db

logger = logging.getLogger(__name__)

# Non-standard code the game client recognises as "statement failed"
STATEMENT_FAILED_STATUS = 513


def create_submission(
    submission_id: str = Form("", alias="id"),
    playthrough: Optional[UploadFile] = File(None),
    user: Optional[str] = Form(None),
    version: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    submission = Submission(id=submission_id, user=user, version=version)
    if playthrough is not None:
        submission.filename = playthrough.filename
        submission.payload = playthrough.file.read()

    # Starlette's HTTPException needs a standard status phrase, so plain responses are used here
    try:
        submit_playthrough(db, submission)
    except BackendUnavailable as e:
        logger.error("Connection failed: %s", e)
        return Response(status_code=502)
    except StatementFailed as e:
        logger.error("Error storing submission %s: %s", submission.id, e)
        return Response(status_code=STATEMENT_FAILED_STATUS)
    return Response(status_code=200)


def ignore_submission():
    return Response(status_code=200)


def retrieve_playthrough(playthrough_id: str, db: Session = Depends(get_db)):
    try:
        row = get_playthrough(db, playthrough_id)
    except BackendUnavailable as e:
        logger.error("Connection failed: %s", e)
        return Response(status_code=502)
    except StatementFailed as e:
        logger.error("Error reading playthrough %s: %s", playthrough_id, e)
        return Response(status_code=STATEMENT_FAILED_STATUS)
    if row is None:
        raise HTTPException(status_code=404, detail='Playthrough not found')
    if row.playthrough is None:
        return Response(status_code=204)
    return Response(content=row.playthrough, media_type='application/octet-stream')
