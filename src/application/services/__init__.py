"""Application services shared by several use cases."""

from .freelancer_notifier import FreelancerNotifier

__all__ = ["FreelancerNotifier"]
