"""Sortable ID Service - Entry Point."""

from config import load_config
from ids.generator import Generator
from utils.crash import configure as configure_crash, install_crash_handler

config = load_config()
# One generator for the whole process: crash ids and API ids share its counter
generator = Generator.from_config(config.generator)
configure_crash(config.logging.crash_file, generator)
install_crash_handler()

from service.app import create_app

app = create_app(config, generator)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("idservice:app", host=config.server.host, port=config.server.port, reload=True)
