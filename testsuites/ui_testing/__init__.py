"""Portal authentication UI suites: framework, page objects, fixtures and scenarios."""
