import hmac, logging
from typing import Optional
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from pdi_site.config import webhook_secret

router = APIRouter()
logger = logging.getLogger(__name__)

# delivery headers the content system sends with each webhook
SANITY_HEADERS = ("sanity-webhook-id", "sanity-transaction-time", "sanity-project-id")

def _secret_matches(provided: Optional[str]) -> bool:
    expected = webhook_secret()
    if not expected or provided is None:
        return False
    return hmac.compare_digest(provided.encode(), expected.encode())

@router.get("")
def deploy_endpoint_info():
    logger.info("deploy webhook probe (secret configured: %s)", webhook_secret() is not None)
    return PlainTextResponse("Endpoint for deploy webhook", status_code=200)

@router.post("")
async def receive_deploy_webhook(request: Request):
    if (
        request.headers.get("content-type") == "application/json"
        and _secret_matches(request.headers.get("webhook-secret"))
    ):
        body = await request.json()
        delivery = {h: request.headers.get(h) for h in SANITY_HEADERS}
        logger.info("deploy webhook accepted: %r", delivery)
        logger.debug("deploy webhook body: %r", body)
        return PlainTextResponse("Accepted", status_code=202)

    logger.warning("deploy webhook rejected (content-type=%r)", request.headers.get("content-type"))
    return JSONResponse({"error": "Webhook incorrectly configured."}, status_code=400)
