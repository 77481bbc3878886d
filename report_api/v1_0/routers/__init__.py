from .report_router import router as report_router
defined_routers = [
    report_router,
    ]
