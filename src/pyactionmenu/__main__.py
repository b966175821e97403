from pyactionmenu.app import EditorApp
from pyactionmenu.core import get_app_logger, init_logging, init_telemetry


def main() -> None:
	cfg = {
		"log_level": "INFO",
		"telemetry_enabled": True,
		"telemetry_sink": "log",
	}

	init_logging(cfg)
	telemetry = init_telemetry(cfg, logger=get_app_logger("telemetry"))

	app = EditorApp(cfg=cfg, telemetry=telemetry)
	app.run()


if __name__ == "__main__":
	main()
