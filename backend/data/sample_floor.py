"""Sample campus building for the map viewer and tests."""

from core.models import Blueprint, Building, Floor, Room, rect
from core.rooms import RoomKind


def create_sample_building() -> Building:
    """Create a hardcoded two-floor teaching building."""
    return Building(
        id="building-1",
        name="Centro de Informatica",
        code="CI",
        floors=[
            _ground_floor(),
            _second_floor(),
        ],
    )


def _ground_floor() -> Floor:
    """Ground floor: L-shaped research lab, classrooms, offices around a T-shaped corridor."""
    return Floor(
        id="floor-ground",
        name="Terreo",
        level=0,
        blueprint=Blueprint(width=400, height=260),
        rooms=[
            Room(
                id="lab-research-1",
                location="Laboratorio de Pesquisa 1",
                kind=RoomKind.LAB_RESEARCH,
                # L-shape: the small rectangle hangs below the left half of the large one
                shapes=[rect(0, 0, 115, 115), rect(0, 115, 55, 20)],
                labs=["aria", "lumo"],
            ),
            Room(
                id="classroom-101",
                location="Sala 101",
                kind=RoomKind.CLASSROOM,
                shapes=[rect(115, 0, 100, 80)],
            ),
            Room(
                id="professors-1",
                location="Sala dos Professores 1",
                kind=RoomKind.PROFESSOR_OFFICE,
                shapes=[rect(215, 0, 60, 80)],
                professors=["Ruy Jose Guerra", "Mardson Freitas", "Henrique Cunha"],
            ),
            Room(
                id="bathroom-ground",
                location="Banheiros",
                kind=RoomKind.BATHROOM,
                shapes=[rect(275, 0, 40, 80)],
            ),
            Room(
                id="stairs-ground",
                location="Escada",
                kind=RoomKind.STAIRS,
                shapes=[rect(315, 0, 85, 80)],
            ),
            Room(
                id="corridor-ground",
                location="Corredor",
                kind=RoomKind.CORRIDOR,
                # T-shape: horizontal bar plus a stem running down
                shapes=[rect(115, 80, 285, 40), rect(240, 120, 40, 140)],
            ),
            Room(
                id="library",
                location="Biblioteca Setorial",
                kind=RoomKind.LIBRARY,
                # irregular reading room stepping around the corridor
                shapes=[rect(55, 135, 60, 125), rect(115, 200, 125, 60), rect(115, 120, 50, 80)],
            ),
            Room(
                id="coordination",
                location="Coordenacao de Graduacao",
                kind=RoomKind.INSTITUTIONAL_OFFICE,
                shapes=[rect(280, 120, 120, 70)],
            ),
            Room(
                id="shared-ground",
                location="Espaco de Convivencia",
                kind=RoomKind.SHARED_SPACE,
                shapes=[rect(280, 190, 120, 70)],
            ),
        ],
    )


def _second_floor() -> Floor:
    """Second floor: teaching labs along a straight corridor."""
    return Floor(
        id="floor-2",
        name="1o Andar",
        level=1,
        blueprint=Blueprint(width=400, height=200),
        rooms=[
            Room(
                id="lab-class-201",
                location="Laboratorio de Ensino 201",
                kind=RoomKind.LAB_CLASS,
                shapes=[rect(0, 0, 130, 80)],
            ),
            Room(
                id="lab-class-202",
                location="Laboratorio de Ensino 202",
                kind=RoomKind.LAB_CLASS,
                # stacked halves of one room
                shapes=[rect(130, 0, 130, 40), rect(130, 40, 130, 40)],
            ),
            Room(
                id="lab-research-2",
                location="Laboratorio de Pesquisa 2",
                kind=RoomKind.LAB_RESEARCH,
                shapes=[rect(260, 0, 140, 80)],
                labs=["tril"],
            ),
            Room(
                id="corridor-2",
                location="Corredor",
                kind=RoomKind.CORRIDOR,
                shapes=[rect(0, 80, 400, 40)],
            ),
            Room(
                id="classroom-203",
                location="Sala 203",
                kind=RoomKind.CLASSROOM,
                shapes=[rect(0, 120, 200, 80)],
            ),
            Room(
                id="bathroom-2",
                location="Banheiros",
                kind=RoomKind.BATHROOM,
                shapes=[rect(200, 120, 50, 80)],
            ),
            Room(
                id="stairs-2",
                location="Escada",
                kind=RoomKind.STAIRS,
                shapes=[rect(250, 120, 150, 80)],
            ),
        ],
    )


SAMPLE_BUILDING = create_sample_building()
