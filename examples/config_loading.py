"""config_loading.py"""

from gash.config import loader

gash = loader("gash.yaml")

if __name__ == "__main__":
    import asyncio

    asyncio.run(gash.menu())
