"""A 2D camera that maps between world space and screen space."""

from __future__ import annotations

from dataclasses import dataclass, field

from tinyengine.constants import ZERO_THRESHOLD, degrees_to_rad
from tinyengine.matrix import Matrix3x3, SingularMatrixError
from tinyengine.vector import Vector2


@dataclass
class Camera2D:
    """Camera with a position, a zoom factor and a rotation in radians."""

    position: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    zoom: float = 1.0
    rotation: float = 0.0

    def view_matrix(self) -> Matrix3x3:
        """Matrix that translates, then rotates, then scales world points into view space."""
        scale = Matrix3x3.scaling(self.zoom, self.zoom)
        rotation = Matrix3x3.rotation(-self.rotation)
        translation = Matrix3x3.translation(-self.position.x, -self.position.y)
        return scale @ rotation @ translation

    def projection_matrix(self, screen_width: float, screen_height: float) -> Matrix3x3:
        """Matrix from normalised coordinates to screen pixels, with y pointing down."""
        half_width = screen_width / 2.0
        half_height = screen_height / 2.0
        return Matrix3x3(
            (
                (half_width, 0, half_width),
                (0, -half_height, half_height),
                (0, 0, 1),
            )
        )

    def view_projection_matrix(self, screen_width: float, screen_height: float) -> Matrix3x3:
        return self.projection_matrix(screen_width, screen_height) @ self.view_matrix()

    def screen_to_world(
        self, screen_pos: Vector2, screen_width: float, screen_height: float
    ) -> Vector2:
        """Convert a screen position to world space; the origin if the view cannot be inverted."""
        half_width = screen_width / 2.0
        half_height = screen_height / 2.0
        normalized = Vector2(
            (screen_pos.x - half_width) / half_width,
            (half_height - screen_pos.y) / half_height,
        )
        try:
            inverse_view = self.view_matrix().inverse()
        except SingularMatrixError:
            return Vector2(0.0, 0.0)
        return inverse_view.transform_point(normalized)

    def world_to_screen(
        self, world_pos: Vector2, screen_width: float, screen_height: float
    ) -> Vector2:
        """Convert a world position to screen pixels."""
        view_pos = self.view_matrix().transform_point(world_pos)
        half_width = screen_width / 2.0
        half_height = screen_height / 2.0
        return Vector2(
            view_pos.x * half_width + half_width,
            half_height - view_pos.y * half_height,
        )

    def set_zoom(self, zoom: float) -> None:
        """Set the zoom; non-positive values are ignored."""
        if zoom > 0:
            self.zoom = zoom

    def set_rotation_degrees(self, degrees: float) -> None:
        self.rotation = degrees_to_rad(degrees)

    def move(self, offset: Vector2) -> None:
        self.position = self.position.add(offset)

    def zoom_by(self, factor: float) -> None:
        """Multiply the zoom by ``factor``; non-positive factors are ignored."""
        if factor > 0:
            self.zoom *= factor

    def rotate(self, angle: float) -> None:
        self.rotation += angle

    def rotate_degrees(self, degrees: float) -> None:
        self.rotation += degrees_to_rad(degrees)

    def bounds(self, screen_width: float, screen_height: float) -> tuple[Vector2, Vector2]:
        """Return the (min, max) corners of the world area visible on screen."""
        corners = [
            self.screen_to_world(Vector2(x, y), screen_width, screen_height)
            for x, y in (
                (0.0, 0.0),
                (screen_width, 0.0),
                (0.0, screen_height),
                (screen_width, screen_height),
            )
        ]
        xs = [corner.x for corner in corners]
        ys = [corner.y for corner in corners]
        return Vector2(min(xs), min(ys)), Vector2(max(xs), max(ys))

    def look_at(self, target: Vector2) -> None:
        self.position = target

    def follow_target(self, target: Vector2, follow_speed: float, delta_time: float) -> None:
        """Move towards ``target`` by at most ``follow_speed * delta_time``."""
        if follow_speed <= 0 or delta_time <= 0:
            return
        direction = target.sub(self.position)
        distance = direction.length()
        if distance > ZERO_THRESHOLD:
            max_distance = follow_speed * delta_time
            if distance > max_distance:
                direction = direction.normalize().scale(max_distance)
            self.position = self.position.add(direction)