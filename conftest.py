pytest_plugins = ["branch_protection_report.testing.conftest"]
