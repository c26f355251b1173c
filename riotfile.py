# type: ignore
from riot import Venv


latest = ""

SUPPORTED_PYS = ["3.8", "3.9", "3.10", "3.11", "3.12", "3.13"]


venv = Venv(
    pys=SUPPORTED_PYS,
    pkgs={
        "mock": latest,
        "pytest": latest,
        "hypothesis": latest,
    },
    venvs=[
        Venv(
            name="netsemconv",
            command="pytest {cmdargs} tests/instrumenter tests/internal tests/settings",
        ),
        Venv(
            name="opentelemetry",
            command="pytest {cmdargs} tests/instrumenter/test_attributes.py",
            pkgs={
                "opentelemetry-api": ["~=1.0.0", "~=1.15.0", latest],
            },
        ),
        Venv(
            name="contrib",
            command="pytest {cmdargs} tests/contrib",
        ),
    ],
)
