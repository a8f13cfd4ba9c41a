import pytest


def pytest_addoption(parser):
    parser.addoption("--quick", action="store_true",
                     default=False, help="skip the exhaustive comparisons against brute force")
    parser.addoption("--slow", action="store_true",
                     default=False, help="only run the exhaustive comparisons")


def pytest_configure(config):
    if config.getoption("--quick") and config.getoption("--slow"):
        raise pytest.UsageError("--quick and --slow are mutually exclusive")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--slow"):
        return
    skip_quick = pytest.mark.skip(reason="only running slow tests")
    for item in items:
        if 'slow' not in item.fixturenames:
            item.add_marker(skip_quick)
