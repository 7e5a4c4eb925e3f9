def pytest_addoption(parser):
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests including the slow convergence studies.",
    )


def pytest_configure(config):
    if config.getoption("--run-all"):
        #clear the 'not slow' filter from pyproject.toml
        config.option.markexpr = ""
