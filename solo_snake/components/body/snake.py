from solo_snake.components.body.component import BodyComponent


class SnakeBody(BodyComponent):
    """
    Snake segments ordered head first. A fresh snake is a single cell.
    """

    def __init__(self, position: tuple[int, int] = (0, 0)):
        super().__init__(starting_position=position)

    @property
    def head(self):
        return self.segments[0]

    @property
    def body_without_tail(self):
        return self.segments[:-1]

    def __len__(self):
        return len(self.segments)

    def advance(self, new_head: tuple[int, int], grow: bool = False):
        self.segments.insert(0, tuple(new_head))

        # Tail stays in place on the tick the snake eats
        if not grow:
            self.segments.pop()

    def reset(self, position: tuple[int, int]):
        self.segments = [tuple(position)]
