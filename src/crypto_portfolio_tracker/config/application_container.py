import tomllib
from os import getcwd
from pathlib import Path

from dependency_injector import containers, providers

from crypto_portfolio_tracker.config.configuration_properties import ConfigurationProperties
from crypto_portfolio_tracker.infrastructure.adapters.config.adapters_container import AdaptersContainer
from crypto_portfolio_tracker.infrastructure.config.infrastructure_container import InfrastructureContainer


class ApplicationContainer(containers.DeclarativeContainer):
    configuration_properties = providers.Singleton(ConfigurationProperties)

    @staticmethod
    def _project_version() -> str:
        pyproject_path = Path(getcwd()) / "pyproject.toml"
        if not pyproject_path.is_file():
            return "0.0.0"
        with pyproject_path.open("rb") as f:
            pyproject = tomllib.load(f)
        ret = pyproject["project"]["version"]
        return ret

    application_version: str = providers.Callable(_project_version)

    adapters_container = providers.Container(AdaptersContainer, configuration_properties=configuration_properties)

    infrastructure_container = providers.Container(
        InfrastructureContainer,
        configuration_properties=configuration_properties,
        portfolio_tracker_remote_service=adapters_container.portfolio_tracker_remote_service,
    )
