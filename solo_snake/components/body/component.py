class BodyComponent:
    def __init__(self, starting_position: tuple[int, int] = (0, 0)):
        self.segments: list[tuple[int, int]] = [tuple(starting_position)]

    @property
    def position(self):
        return self.segments[0]

    @position.setter
    def position(self, new_position: tuple[int, int]):
        self.segments[0] = tuple(new_position)

    def occupies(self, position: tuple[int, int]) -> bool:
        return tuple(position) in self.segments
