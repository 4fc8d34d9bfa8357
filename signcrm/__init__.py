"""SignCRM: jobs, quotations and financials for a sign-making business."""

__version__ = "1.0.0"
