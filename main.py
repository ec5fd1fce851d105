"""
main.py — Bootstrap

1. Load tuning constants
2. Resolve the save file
3. Create the app
4. Push the habitat scene
5. Run (the scene saves on the way out)
"""

from pathlib import Path

from core import tuning
from core.app import App
from core.constants import DEFAULT_SAVE_PATH, WINDOW_WIDTH, WINDOW_HEIGHT, FPS
from scenes.aquarium_scene import AquariumScene


def main():
    tuning.load()

    save_path = Path(tuning.get("save", "path", DEFAULT_SAVE_PATH))
    print(f"[MAIN] Save file: {save_path.resolve()}")

    app = App(
        title=tuning.get("window", "title", "Marimo Habitat"),
        width=int(tuning.get("window", "width", WINDOW_WIDTH)),
        height=int(tuning.get("window", "height", WINDOW_HEIGHT)),
        fps=int(tuning.get("window", "fps", FPS)),
    )
    app.push_scene(AquariumScene(save_path))
    app.run()


if __name__ == "__main__":
    main()
