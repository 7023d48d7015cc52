"""Activity endpoint.

Receives one activity per request and answers with the replies for it.
"""

from fastapi import APIRouter

from ebobot.api.dependencies import TurnRunnerDep
from ebobot.api.models.turn import TurnResponse
from ebobot.conversation.models import Activity

router = APIRouter()


@router.post(
    "/api/messages",
    response_model=TurnResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def post_activity(activity: Activity, runner: TurnRunnerDep) -> TurnResponse:
    """Process one inbound activity.

    Errors map to: 400 for unprocessable activities, 409 when the
    conversation is busy with another turn, 503 when state is unavailable.
    Replies produced before a failure are returned with the error body.
    """
    replies = await runner.run(activity)
    return TurnResponse(activities=replies)
