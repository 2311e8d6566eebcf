"""Tests for layered render surfaces."""
import pygame
import pytest

from skydrop.graphics import LayerStack, RenderLayer, covering_rect


@pytest.fixture
def layer():
    return RenderLayer('test', (100, 80))


@pytest.fixture
def red_square():
    image = pygame.Surface((10, 10), pygame.SRCALPHA)
    image.fill((255, 0, 0, 255))
    return image


class TestCoveringRect:
    """Test covering_rect()."""

    def test_integer_rect_unchanged(self):
        assert covering_rect(5, 6, 10, 12) == pygame.Rect(5, 6, 10, 12)

    def test_fractional_rect_grows(self):
        assert covering_rect(1.5, 2.5, 10, 10) == pygame.Rect(1, 2, 11, 11)

    def test_negative_position(self):
        assert covering_rect(-0.5, 0, 2, 2) == pygame.Rect(-1, 0, 3, 2)


class TestRenderLayer:
    """Test RenderLayer drawing operations."""

    def test_starts_transparent(self, layer):
        assert layer.surface.get_at((50, 40)).a == 0
        assert (layer.width, layer.height) == (100, 80)

    def test_draw_and_clear_rect(self, layer, red_square):
        layer.draw_image(red_square, 20, 20)
        assert layer.surface.get_at((25, 25)) == pygame.Color(255, 0, 0, 255)

        layer.clear_rect(20, 20, 10, 10)
        assert layer.surface.get_at((25, 25)).a == 0

    def test_clear_rect_covers_fractional_position(self, layer, red_square):
        layer.draw_image(red_square, 20.5, 20.5)
        layer.clear_rect(20.5, 20.5, 10, 10)
        for x in range(18, 33):
            assert layer.surface.get_at((x, 25)).a == 0

    def test_clear(self, layer, red_square):
        layer.draw_image(red_square, 0, 0)
        layer.clear()
        assert layer.surface.get_at((5, 5)).a == 0

    def test_fill_rect_opaque(self, layer):
        layer.fill_rect(0, 0, 10, 10, (0, 0, 255))
        assert layer.surface.get_at((5, 5)) == pygame.Color(0, 0, 255, 255)

    def test_fill_rect_translucent(self, layer):
        layer.fill_rect(0, 0, 10, 10, (255, 255, 255), alpha=102)
        assert 0 < layer.surface.get_at((5, 5)).a < 255
        assert layer.surface.get_at((15, 15)).a == 0

    def test_fill_text_draws_something(self, layer):
        layer.fill_text("Score: 1", 5, 30, (165, 42, 42))
        painted = any(
            layer.surface.get_at((x, y)).a > 0
            for x in range(5, 60) for y in range(10, 32)
        )
        assert painted


class TestLayerStack:
    """Test LayerStack compositing."""

    def test_names_in_order(self):
        stack = LayerStack((10, 10), ['back', 'front'])
        assert stack.names == ['back', 'front']
        assert 'back' in stack
        assert 'middle' not in stack

    def test_front_layer_wins(self):
        stack = LayerStack((10, 10), ['back', 'front'])
        stack['back'].fill_rect(0, 0, 10, 10, (255, 0, 0))
        stack['front'].fill_rect(0, 0, 5, 10, (0, 255, 0))

        target = pygame.Surface((10, 10))
        stack.composite(target)

        assert target.get_at((2, 5))[:3] == (0, 255, 0)
        assert target.get_at((7, 5))[:3] == (255, 0, 0)
