import os
import sys
import uvicorn

from nitron.config import Config

def main():
    config = Config(sys.argv[1] if len(sys.argv) > 1 else None)

    # Must be set before nitron.main is imported, its loggers are created at import
    os.environ.setdefault("NITRON_LOG_DIR", str(config.log_dir))
    os.environ.setdefault("NITRON_LOG_LEVEL", str(config.log_level))
    from nitron.main import create_app

    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port)

if __name__ == "__main__":
    main()
