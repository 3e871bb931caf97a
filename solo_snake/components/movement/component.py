from solo_snake.constants.directions import STILL


class MovementComponent:
    def __init__(self):
        self.direction = STILL
        self.speed = 1  # Grid squares per tick

    def move(self):
        raise NotImplementedError(f"Child component MUST implement {self.move.__name__}")
