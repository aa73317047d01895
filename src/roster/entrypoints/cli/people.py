"""ROSTER people CLI: list, add and update person records.

Behavior
- Validation failures (names, height text) are reported as Click usage errors
  naming the offending argument (exit code 2).
- Data-access failures (unreachable store, missing ``Person`` table) become
  ``ClickException`` (exit code 1) with a hint to run ``roster db upgrade``.
- Records are written to **stdout** one per line, tab separated:
  ``<id>\t<first>\t<last>\t<height in inches>``.

Requirements
- ``ROSTER_DB_URL`` must be set for every command except ``height``.
"""

from __future__ import annotations

import dataclasses
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from roster.bootstrap import bootstrap
from roster.domain.errors import InvalidArgumentError
from roster.interfaces.data_access import DataAccessError
from roster.service_layer import PersonProcessor

from .db import UPGRADE_SCHEMA_INSTRUCTIONS, get_url
from .helpers import success

if TYPE_CHECKING:
    from collections.abc import Iterator

    from roster.domain.models import PersonModel

logger = logging.getLogger(__name__)

# Python parameter name -> CLI argument name
PARAM_HINTS = {
    "first_name": "FIRST_NAME",
    "last_name": "LAST_NAME",
    "height_text": "HEIGHT",
}

DATA_ACCESS_FAILED_MSG = "Person store request failed: {reason}"


def format_person(person: PersonModel) -> str:
    """Render one record as a tab-separated line."""
    return "\t".join(
        [
            str(person.id),
            person.first_name,
            person.last_name,
            f"{person.height_in_inches:g}",
        ]
    )


def _create(first_name: str, last_name: str, height: str) -> PersonModel:
    try:
        return PersonProcessor().create_person(first_name, last_name, height)
    except InvalidArgumentError as e:
        raise click.BadParameter(
            e.reason, param_hint=PARAM_HINTS.get(e.param_name, e.param_name)
        ) from e


def _data_access_failure(e: DataAccessError) -> click.ClickException:
    logger.debug("Data access failed", exc_info=e)
    return click.ClickException(
        DATA_ACCESS_FAILED_MSG.format(reason=e)
        + f"\n{UPGRADE_SCHEMA_INSTRUCTIONS}"
    )


@contextmanager
def _person_store() -> Iterator[PersonProcessor]:
    """Yield a processor for `ROSTER_DB_URL`; data-access failures become ClickException."""
    url = get_url()
    try:
        with bootstrap(url) as processor:
            yield processor
    except DataAccessError as e:
        raise _data_access_failure(e) from e


@click.group(cls=clickx.ExtraGroup)
def people() -> None:
    """Person record commands."""


@people.command(name="list")
def list_people() -> None:
    """List every stored person."""
    with _person_store() as processor:
        records = processor.load_people()
    for person in records:
        click.echo(format_person(person))


@people.command()
@click.argument("first_name")
@click.argument("last_name")
@click.argument("height")
def add(first_name: str, last_name: str, height: str) -> None:
    """Validate and store a new person.

    HEIGHT is feet and inches, e.g. 6'8"
    """
    person = _create(first_name, last_name, height)
    with _person_store() as processor:
        processor.save_person(person)
    success(f"Saved {person.first_name} {person.last_name}.")


@people.command()
@click.argument("person_id", metavar="ID", type=click.IntRange(min=1))
@click.argument("first_name")
@click.argument("last_name")
@click.argument("height")
def update(person_id: int, first_name: str, last_name: str, height: str) -> None:
    """Validate and overwrite the stored person with ID.

    An unknown ID changes nothing.
    """
    person = dataclasses.replace(_create(first_name, last_name, height), id=person_id)
    with _person_store() as processor:
        processor.update_person(person)
    success(f"Updated person {person_id}.")


@people.command(name="height")
@click.argument("height_text", metavar="HEIGHT")
def convert_height(height_text: str) -> None:
    """Convert HEIGHT (e.g. 6'8") to inches."""
    is_valid, inches = PersonProcessor().convert_height_text_to_inches(height_text)
    if not is_valid:
        raise click.BadParameter(
            "expected <feet>'<inches>\" (e.g. 6'8\")", param_hint="HEIGHT"
        )
    click.echo(f"{inches:g}")
