"""Container assembly for the API process and scripts."""

import logfire
from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import PROVIDERS, get_provider


def create_container(*extra: Provider) -> AsyncContainer:
    """Build the production container.

    Every component uses its production provider; the storage backend is
    picked later from `STORAGE__BACKEND` when repositories are first
    resolved.

    Args:
        extra: Additional providers, e.g. FastapiProvider for the API

    Returns:
        Configured DI container
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, *extra)


def create_api_container() -> AsyncContainer:
    """Build the production container used by the HTTP API."""
    return create_container(FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app, replacing any previous one.

    Tests call this a second time to swap in a container with in-memory
    repositories.
    """
    setup_dishka(container, app)
    logfire.debug("DI container attached", providers=len(PROVIDERS))
