from typing import Any

from ..errors import BadRequestError


class BeaconCounter:
    """Distinct-user presence counter per job id.

    Sets are never evicted; a job's entry lives until the process exits.
    """

    def __init__(self):
        self._jobs: dict[str, set[str]] = {}

    def __len__(self) -> int:
        return len(self._jobs)

    def record(self, job_id: Any, user_id: Any) -> int:
        """Add a user to a job's set and return the job's new count."""
        if not user_id or not job_id:
            raise BadRequestError("Missing userId or jobId")
        users = self._jobs.setdefault(str(job_id), set())
        users.add(str(user_id))
        return len(users)

    def count(self, job_id: Any) -> int:
        if not job_id:
            raise BadRequestError("Missing jobId")
        return len(self._jobs.get(str(job_id), ()))
