from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from ..summary import DaySummary

router = APIRouter(prefix="/summary", tags=["summary"])


def get_day_summary(request: Request) -> DaySummary:
    return request.app.state.day_summary


@router.get("")
def day_summary(summary: DaySummary = Depends(get_day_summary)):
    return summary.as_dict()


@router.get("/text", response_class=PlainTextResponse)
def day_summary_text(summary: DaySummary = Depends(get_day_summary)):
    return summary.to_text()
