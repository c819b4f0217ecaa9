
# collector/routers.py
from fastapi import APIRouter
from .views import create_submission, ignore_submission, retrieve_playthrough

router = APIRouter()

IGNORED_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]

router.post("/submit-playthrough")(create_submission)
router.api_route("/submit-playthrough", methods=IGNORED_METHODS, include_in_schema=False)(ignore_submission)

# released game builds post here
router.post("/submit-playthrough.php", include_in_schema=False)(create_submission)
router.api_route("/submit-playthrough.php", methods=IGNORED_METHODS, include_in_schema=False)(ignore_submission)

router.get("/playthroughs/{playthrough_id:path}")(retrieve_playthrough)
