import os, sys
import tempfile
from pathlib import Path

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

# Keep test runs away from the user's real cache and config
os.environ.setdefault("WIKI_CACHE_ROOT", str(Path(tempfile.gettempdir()) / "wiki-cache-tests"))
os.environ.setdefault("WIKI_CACHE_CONFIG", str(Path(tempfile.gettempdir()) / "wiki-cache-tests-missing.toml"))
os.environ.setdefault("WIKI_CACHE_PERSISTENT", "1")
os.environ.setdefault("WIKI_CACHE_FLUSH_AT_EXIT", "0")
