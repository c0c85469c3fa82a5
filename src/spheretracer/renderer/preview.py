# renderer/preview.py
import numpy as np
import pygame


def image_to_surface(rgb: np.ndarray) -> pygame.Surface:
    """
    Converts a (height, width, 3) uint8 image into a pygame surface.
    surfarray indexes pixels as [x, y], so rows and columns are swapped.
    """
    return pygame.surfarray.make_surface(np.ascontiguousarray(np.transpose(rgb, (1, 0, 2))))


def show(rgb: np.ndarray, title: str = "spheretracer", scale: int = 2):
    """
    Opens a window showing the finished image until it is closed or
    Escape is pressed.
    """
    height, width, _ = rgb.shape
    pygame.init()
    try:
        screen = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption(title)

        surf = image_to_surface(rgb)
        surf = pygame.transform.scale(surf, (width * scale, height * scale))
        screen.blit(surf, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(30)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
    finally:
        pygame.quit()
