# Este archivo publica el paquete con la estrategia configurada (yarn, npm o skip).

"""
Package publish step.

Dispatches to the configured package manager. A failed publish is fatal.
"""
from pathlib import Path  # Manejo moderno de rutas de archivos
from typing import Union  # Type hints para uniones de tipos

from ..exceptions import UnsupportedStrategyError  # Excepción para estrategias desconocidas
from ..models.release import PublishStrategy  # Estrategias de publicación soportadas
from ..utils.logging import get_logger  # Logger estructurado
from ..utils.process import run_command  # Ejecución de comandos externos

logger = get_logger(__name__)


def resolve_strategy(publish_with: str) -> PublishStrategy:
    """
    Map the PUBLISH_WITH value to a strategy.

    Raises:
        UnsupportedStrategyError: If the value is not a known strategy
    """
    try:
        return PublishStrategy(publish_with)
    except ValueError as e:
        raise UnsupportedStrategyError(
            f"Unsupported publish type: {publish_with}",
            context={
                "publish_with": publish_with,
                "supported": [strategy.value for strategy in PublishStrategy]
            }
        ) from e


def publish_package(cwd: Union[str, Path], publish_with: str, version: str) -> bool:
    """
    Publish the package.

    Args:
        cwd: Package directory
        publish_with: Configured strategy (yarn, npm or skip)
        version: Version being released

    Returns:
        True if a publish command ran, False for the skip strategy

    Raises:
        UnsupportedStrategyError: If the strategy is unknown
        CommandError: If the publish command fails
    """
    strategy = resolve_strategy(publish_with)

    if strategy is PublishStrategy.SKIP:
        logger.info("publish_skipped", version=version)
        return False

    if strategy is PublishStrategy.YARN:
        run_command(cwd, "yarn", "publish", "--non-interactive", "--new-version", version)
    elif strategy is PublishStrategy.NPM:
        # npm publishes the version already in package.json
        run_command(cwd, "npm", "publish", "--access", "public")

    logger.info("package_published", version=version, strategy=strategy.value)
    return True
