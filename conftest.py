"""
This file configures a local pytest plugin, which allows us to configure plugin hooks to control the
execution of our tests.

Local plugins: https://docs.pytest.org/en/stable/how-to/writing_plugins.html#local-conftest-plugins
"""
import hypothesis


# Disable the "too slow" health checks. We are ok if data generation is slow
# https://hypothesis.readthedocs.io/en/latest/healthchecks.html#hypothesis.HealthCheck.too_slow
hypothesis.settings.register_profile("default", suppress_health_check=(hypothesis.HealthCheck.too_slow,))
hypothesis.settings.load_profile("default")
