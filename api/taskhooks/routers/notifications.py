import logging

from fastapi import APIRouter, Depends

from taskhooks.auth import require_api_key
from taskhooks.channels.dispatcher import build_notifications
from taskhooks.config import settings
from taskhooks.i18n import get_translator
from taskhooks.notifications import notification_for
from taskhooks.response import single_response
from taskhooks.routing import RouteUrlGenerator
from taskhooks.schemas.notification import BuildRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("/build", summary="Build the channel messages for a finished task")
async def build(body: BuildRequest, _key=Depends(require_api_key)):
    notification = notification_for(body.event, body.project, body.task)
    report = build_notifications(
        notification,
        body.hooks,
        translator=get_translator(settings.locale),
        urls=RouteUrlGenerator(settings.app_url),
    )

    logger.info(
        "Built notifications for task %s (%s): %d message(s), %d failure(s)",
        body.task.id,
        notification.event,
        len(report.messages),
        len(report.failures),
    )
    return single_response(report.to_dict())
