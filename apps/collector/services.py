import logging
from typing import Optional

from sqlalchemy import insert, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from apps.collector.models import Playthrough
from apps.collector.schema import Submission, SubmissionResult

logger = logging.getLogger(__name__)


class BackendUnavailable(Exception):
    """The database could not be reached or rejected the credentials."""


class StatementFailed(Exception):
    """A statement on the playthroughs table was rejected by the database."""


def _reason(e: SQLAlchemyError) -> str:
    # DBAPIError text also carries the SQL and bound parameters; log the driver message only
    orig = getattr(e, "orig", None)
    return str(orig if orig is not None else e)


def _connect(db: Session) -> None:
    logger.info("Connecting to database")
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        db.rollback()
        raise BackendUnavailable(_reason(e)) from e
    logger.info("Connected to database")


def submit_playthrough(db: Session, submission: Submission) -> SubmissionResult:
    """Store a submission: create the row when no file is attached, otherwise
    attach the file's bytes to the existing row.

    The branch depends only on the attachment, never on whether the row
    exists, so an upload for an id that was never initialized updates nothing.
    """
    _connect(db)
    logger.info("Submission id: %s (user=%s, version=%s)", submission.id, submission.user, submission.version)

    if submission.has_file:
        logger.info("Found file %r with %d bytes", submission.filename, len(submission.payload))
        stmt = update(Playthrough).where(Playthrough.id == submission.id).values(playthrough=submission.payload)
    else:
        stmt = insert(Playthrough).values(id=submission.id)

    try:
        res = db.execute(stmt)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StatementFailed(_reason(e)) from e

    result = SubmissionResult(action="update" if submission.has_file else "insert", rows_affected=res.rowcount)
    if result.rows_affected == 0:
        logger.info("No playthrough row for id %s, update matched nothing", submission.id)
    else:
        logger.info("Stored submission %s (%s)", submission.id, result.action)
    return result


def get_playthrough(db: Session, playthrough_id: str) -> Optional[Playthrough]:
    _connect(db)
    try:
        return db.scalars(select(Playthrough).where(Playthrough.id == playthrough_id)).first()
    except SQLAlchemyError as e:
        db.rollback()
        raise StatementFailed(_reason(e)) from e
