from src.core.uid import UUID4Generator


def test_ids_are_unique() -> None:
    generator = UUID4Generator()
    ids = {generator.next_id() for _ in range(1000)}
    assert len(ids) == 1000
    assert all(isinstance(game_id, str) and game_id for game_id in ids)
