from crypto_portfolio_tracker.infrastructure.tasks.base.abstract_task_service import AbstractTaskService

__all__ = ["AbstractTaskService"]
