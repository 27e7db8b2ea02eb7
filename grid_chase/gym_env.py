"""Gymnasium environment wrapper for Grid Chase.

One environment step is one frame of the game: the chosen input event is
applied, then the world ticks once. The observation is the rendered RGBA
frame. There is no scoring rule, so the reward is always ``0.0``, and the
game never ends on its own (wrap with ``gymnasium.wrappers.TimeLimit`` to
bound episodes).

Usage:

``env = GridChaseEnv(num_enemies=3, movement_type="chase")``

Keyword arguments are forwarded to :class:`grid_chase.config.GameConfig`.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
import numpy.typing as npt
from PIL.Image import Image as PILImage

from grid_chase.actions import Action
from grid_chase.config import GameConfig, generate
from grid_chase.renderer.canvas import CanvasRenderer
from grid_chase.state import World
from grid_chase.step import step

logger = logging.getLogger(__name__)

ObsType = npt.NDArray[np.uint8]


class GridChaseEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for Grid Chase.

    The action space is ``Discrete(len(Action))``; see :mod:`grid_chase.actions`
    and :class:`grid_chase.actions.GymAction` for the index mapping.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(self, render_mode: str = "texture", **kwargs: Any):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open a viewer.
            **kwargs: ``GameConfig`` fields (surface size, enemy count, seed...).
        """
        from gymnasium import spaces

        self.config = GameConfig(**kwargs)
        self.render_mode = render_mode
        self.world: Optional[World] = None
        self._renderer = CanvasRenderer(width=self.config.width, height=self.config.height)

        self.observation_space = spaces.Box(
            low=0,
            high=255,
            shape=(self.config.height, self.config.width, 4),
            dtype=np.uint8,
        )
        self.action_space = spaces.Discrete(len(Action))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new game.

        Arguments:
            seed: World seed. Falls back to the configured seed, then to a draw
                from the environment's ``np_random``.
            options: Gymnasium options (unused).

        Returns:
            Observation and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        world_seed = seed if seed is not None else self.config.seed
        if world_seed is None:
            world_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.world = generate(replace(self.config, seed=world_seed))
        logger.info(
            "New game: %dx%d grid, %d enemies, seed %d",
            self.world.grid.cols,
            self.world.grid.rows,
            len(self.world.enemies),
            world_seed,
        )
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one input event and advance one frame.

        Arguments:
            action: Integer index into the ``Action`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        if self.world is None:
            raise RuntimeError("Call reset() before step()")
        if not 0 <= int(action) < len(Action):
            raise ValueError(f"Invalid action: {action}")
        step_action: Action = list(Action)[int(action)]

        self.world = step(self.world, step_action)
        return self._get_obs(), 0.0, False, False, self._get_info()

    def render(self) -> Optional[PILImage]:  # type: ignore[override]
        """Render the current frame.

        Returns the PIL image in "texture" mode; shows it and returns ``None``
        in "human" mode.
        """
        if self.world is None:
            raise RuntimeError("Call reset() before render()")
        img = self._renderer.render(self.world)
        if self.render_mode == "human":
            img.show()
            return None
        elif self.render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{self.render_mode}' not supported.")

    def _get_obs(self) -> ObsType:
        assert self.world is not None
        return np.array(self._renderer.render(self.world), dtype=np.uint8)

    def _get_info(self) -> Dict[str, object]:
        return {}

    def close(self) -> None:
        pass
