from fastapi import APIRouter, HTTPException, Query
from core.config import SchedulerConfig
from schemas.schedule.generate import LabData
from schemas.schedule.result import LabOutput
from scheduler.builder import build_lab_schedule
from exceptions.custom_errors import *
from docs.schedule.lab import schedule_lab_description
import traceback
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedule", tags=["Lab Schedule"])


# generate lab schedule
@router.post(
    "/generate",
    response_model=LabOutput,
    description=schedule_lab_description,
    summary="Generate Lab Schedule",
)
def generate_schedule(
    data: LabData,
    strict: bool = Query(
        default=True,
        description="Reject the whole batch if any analysis type has no specialty mapping.",
    ),
):
    try:
        logger.info(
            "=== API inputs: samples=%d technicians=%d equipment=%d strict=%s ===",
            len(data.samples),
            len(data.technicians),
            len(data.equipment),
            strict,
        )
        config = SchedulerConfig.from_constants(strict=strict)
        return build_lab_schedule(data, config)

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
