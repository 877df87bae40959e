import pygame
from typing import Tuple

Color = Tuple[int, int, int]


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    surface.blit(font.render(text, True, color), pos)


def draw_text_centered(surface: pygame.Surface, text: str, center: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    img = font.render(text, True, color)
    surface.blit(img, img.get_rect(center=center))


def draw_button(surface: pygame.Surface, rect: pygame.Rect, label: str,
                fill: Color, text_color: Color = (255, 255, 255), size: int = 28):
    pygame.draw.rect(surface, fill, rect, border_radius=rect.height // 2)
    draw_text_centered(surface, label, rect.center, text_color, size=size)
