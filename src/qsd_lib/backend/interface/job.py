# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass


@dataclass(frozen=True)
class JobHandle:
    """
    Reference to a job submitted to an execution backend.
    """

    # Identifier of the job.
    id: str
    # Target the job was submitted to.
    target: str
    # Human-friendly URI of a page showing the status of the job, if available.
    uri: str | None = None
