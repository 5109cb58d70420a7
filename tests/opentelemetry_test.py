import pytest

from strictprops.core.config import Config
from strictprops.utils.opentelemetry import get_tracer


@pytest.mark.integration
class TestGetTracer:
    def test_disabled_telemetry(self):
        tracer = get_tracer(Config())
        with tracer.start_as_current_span("muster") as span:
            assert span is not None

    def test_service_name_override(self):
        config = Config()
        config.telemetry.name = "survey-corps"
        tracer = get_tracer(config, name="garrison")
        assert hasattr(tracer, "start_as_current_span")
