"""
================================================================================
Autotest Tools
================================================================================

Infrastructure helpers shared by the test runner and the suites.

Modules:
    - common: Logging setup and filesystem helpers
    - report_tools: Allure attachments, run summary and report generation

Example:
    from autotest_tools.common import init_logger
    from autotest_tools.report_tools.allure_utils import AllureReportProcessor

    init_logger()
    processor = AllureReportProcessor(Path("reports/allure-results"))
    processor.print_summary()

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
