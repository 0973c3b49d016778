"""Firestore client construction and error translation.

One AsyncClient is created per process and shared by every repository.
"""

import os
from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from google.api_core.exceptions import GoogleAPICallError, RetryError
from google.cloud import firestore

from forum.config import StorageSettings
from forum.domain.error import StorageUnavailableError

# Emulator connections need a project id but never check it
_EMULATOR_PROJECT = "demo-forum"


def create_client(settings: StorageSettings) -> firestore.AsyncClient:
    """Create the Firestore async client.

    Args:
        settings: Storage settings

    Returns:
        Configured AsyncClient
    """
    project = settings.project_id
    if settings.emulator_host:
        # Picked up by the client library when the client is built
        os.environ["FIRESTORE_EMULATOR_HOST"] = settings.emulator_host
        project = project or _EMULATOR_PROJECT

    client = firestore.AsyncClient(project=project)
    logfire.info(
        "Firestore client created",
        project=client.project,
        emulator=bool(settings.emulator_host),
    )
    return client


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Translate Google API failures into StorageUnavailableError.

    Callers that treat NotFound as a normal outcome must catch it inside
    the block.

    A transaction that runs out of attempts under contention surfaces as a
    ValueError chained to the last Aborted error, and is translated too.

    Args:
        operation: Name of the repository operation, for the error message
    """
    try:
        yield
    except (GoogleAPICallError, RetryError) as e:
        logfire.error("Firestore call failed", operation=operation, error=str(e))
        raise StorageUnavailableError(operation, e) from e
    except ValueError as e:
        if not isinstance(e.__cause__, GoogleAPICallError):
            raise
        logfire.error(
            "Firestore transaction gave up",
            operation=operation,
            error=str(e),
            cause=str(e.__cause__),
        )
        raise StorageUnavailableError(operation, e) from e
