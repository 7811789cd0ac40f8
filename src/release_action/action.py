# Este es el punto de entrada del action: carga la configuración, decide, crea el tag y publica el paquete.

"""
Release action runner.

Ties the steps together and turns the run outcome into a process exit
code: 0 when released or nothing to do, 78 when the push is not on the
default branch, 1 on any failure.
"""
import sys  # Salida del proceso con código
from typing import Mapping, Optional  # Type hints para mapeos y opcionales

from . import exit_codes  # Códigos de salida del proceso
from .config.settings import Settings, load_settings  # Configuración desde el entorno
from .exceptions import CommandError, ReleaseActionError  # Excepciones personalizadas
from .models.release import DecisionStatus, RunOutcome, TagStatus  # Resultados de cada paso
from .tools.decision_tools import decide  # Motor de decisión
from .tools.publish_tools import publish_package  # Publicación del paquete
from .tools.tag_tools import tag_release  # Creación del tag
from .utils.files import load_event  # Lectura del evento
from .utils.logging import get_logger, setup_logging  # Sistema de logging estructurado

logger = get_logger(__name__)

_TAG_OUTCOMES = {
    TagStatus.CREATED: RunOutcome.TAGGED_AND_PUBLISHED,
    TagStatus.ALREADY_EXISTS: RunOutcome.TAG_EXISTED_AND_PUBLISHED,
    TagStatus.FAILED: RunOutcome.TAG_FAILED_BUT_PUBLISHED,
}


def run_release(settings: Settings) -> RunOutcome:
    """
    Run the release flow once.

    Args:
        settings: Validated action settings

    Returns:
        The run outcome

    Raises:
        ReleaseActionError: On configuration or data errors, and for an
            unsupported publish strategy
    """
    event = load_event(settings.event_path)

    decision = decide(settings, event, settings.workspace)

    if not decision.should_release:
        if decision.status is DecisionStatus.WRONG_BRANCH:
            return RunOutcome.WRONG_BRANCH
        logger.info(
            "no_release_detected",
            message="No release command detected in the commit message, finishing the job."
        )
        return RunOutcome.NO_RELEASE_COMMIT

    tag_status = tag_release(settings.workspace, decision.config, decision.version)

    try:
        publish_package(settings.workspace, decision.config.publish_with, decision.version)
    except CommandError as e:
        logger.error(
            "publish_failed",
            version=decision.version,
            error=str(e),
            context=e.context
        )
        return RunOutcome.PUBLISH_FAILED

    return _TAG_OUTCOMES[tag_status]


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Run the action and return the process exit code.

    Args:
        environ: Configuration source; None reads the process environment
    """
    setup_logging()

    try:
        settings = load_settings(environ)
    except ReleaseActionError as e:
        logger.error("configuration_invalid", error=str(e))
        return exit_codes.GENERAL_ERROR

    setup_logging(level=settings.log_level, json_logs=settings.log_json)

    logger.info(
        "release_action_started",
        workspace=str(settings.workspace),
        event_path=str(settings.event_path),
        default_branch=settings.default_branch,
        publish_with=settings.publish_with
    )

    try:
        outcome = run_release(settings)
    except ReleaseActionError as e:
        logger.error("release_action_failed", error=str(e), context=e.context)
        return exit_codes.GENERAL_ERROR
    except Exception as e:
        logger.exception("release_action_crashed", error=str(e))
        return exit_codes.GENERAL_ERROR

    logger.info("release_action_finished", outcome=outcome.value, exit_code=outcome.exit_code)
    return outcome.exit_code


def main_cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    main_cli()
