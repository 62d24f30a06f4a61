from typing import Any

from pydantic import BaseModel, Field


class BeaconRequest(BaseModel):
    user_id: Any = Field(alias="userId", default=None)
    job_id: Any = Field(alias="jobId", default=None)

    model_config = {"populate_by_name": True}
