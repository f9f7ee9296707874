"""Agent exports."""

from .job_search_agent import run_job_search_agent
from .simplify_agent import run_simplify_agent
from .training_plan_agent import run_training_plan_agent

__all__ = ["run_job_search_agent", "run_simplify_agent", "run_training_plan_agent"]
