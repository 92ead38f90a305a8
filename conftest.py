def pytest_configure(config):
    config.addinivalue_line("markers", "integration: slow end-to-end tests that write video files")
