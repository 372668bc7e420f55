"""Entity directory - the slug -> entity lookup used for lab logos."""

import logging
from collections.abc import Iterable
from typing import TypedDict

import aiohttp

from core.models import Entity, Floor, Room
from core.rooms import RoomKind

logger = logging.getLogger(__name__)

_REQUEST_TIMEOUT_S = 5.0


class EntityPayload(TypedDict, total=False):
    slug: str
    name: str
    imagePath: str | None


SAMPLE_ENTITIES: dict[str, Entity] = {
    "aria": Entity(slug="aria", name="ARIA", image_path="/logos/aria.png"),
    "lumo": Entity(slug="lumo", name="LUMO", image_path=None),
    "tril": Entity(slug="tril", name="TRIL", image_path="/logos/tril.png"),
}


def room_lab_slugs(room: Room) -> set[str]:
    """Lab slugs worth resolving for a room; only research labs show lab names."""
    if room.kind != RoomKind.LAB_RESEARCH:
        return set()
    return set(room.labs)


def lab_slugs(floor: Floor) -> set[str]:
    """All lab slugs referenced by research labs on a floor."""
    slugs: set[str] = set()
    for room in floor.rooms:
        slugs.update(room_lab_slugs(room))
    return slugs


def _parse_entity(slug: str, payload: EntityPayload) -> Entity:
    return Entity(
        slug=payload.get("slug") or slug,
        name=payload.get("name") or slug,
        image_path=payload.get("imagePath"),
    )


class EntityLookupError(Exception):
    """A lookup failed for a transient reason (network, timeout, bad payload)."""


class EntityDirectory:
    """Resolves entity slugs to entities.

    With no ``base_url`` configured the static ``SAMPLE_ENTITIES`` are served.
    Otherwise entities are fetched from ``{base_url}/entidades/{slug}``.
    Found entities and 404s are cached for the lifetime of the process;
    failed lookups are retried on the next call.
    """

    base_url: str | None = None
    timeout_s: float = _REQUEST_TIMEOUT_S
    _cache: dict[str, Entity | None] = {}

    @classmethod
    def configure(cls, base_url: str | None, timeout_s: float = _REQUEST_TIMEOUT_S) -> None:
        cls.base_url = base_url.rstrip("/") if base_url else None
        cls.timeout_s = timeout_s
        cls._cache = {}

    @classmethod
    async def _fetch_one(cls, session: aiohttp.ClientSession, slug: str) -> Entity | None:
        """Fetch one entity; ``None`` means the directory does not know it."""
        url = f"{cls.base_url}/entidades/{slug}"
        try:
            async with session.get(url) as response:
                if response.status == 404:
                    logger.info("Entity %s not found", slug)
                    return None
                response.raise_for_status()
                payload: EntityPayload = await response.json(content_type=None)
        except (aiohttp.ClientError, TimeoutError, ValueError) as exc:
            raise EntityLookupError(f"{slug}: {exc!r}") from exc
        return _parse_entity(slug, payload)

    @classmethod
    async def get_entities(cls, slugs: Iterable[str]) -> dict[str, Entity]:
        """Resolve slugs, silently dropping unknown ones and failed lookups."""
        wanted = sorted(set(slugs))
        if cls.base_url is None:
            return {slug: SAMPLE_ENTITIES[slug] for slug in wanted if slug in SAMPLE_ENTITIES}

        missing = [slug for slug in wanted if slug not in cls._cache]
        if missing:
            timeout = aiohttp.ClientTimeout(total=cls.timeout_s)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                for slug in missing:
                    try:
                        cls._cache[slug] = await cls._fetch_one(session, slug)
                    except EntityLookupError as exc:
                        # A missing logo must never break a map render.
                        logger.warning("Entity lookup failed: %s", exc)

        result: dict[str, Entity] = {}
        for slug in wanted:
            entity = cls._cache.get(slug)
            if entity is not None:
                result[slug] = entity
        return result

    @classmethod
    async def for_floor(cls, floor: Floor) -> dict[str, Entity]:
        return await cls.get_entities(lab_slugs(floor))
