"""Reading specification files from disk or the network, with caching."""

from __future__ import annotations

import logging
import os
import threading
import urllib.error
import urllib.parse
import urllib.request
from pathlib import Path
from typing import Optional

import yaml

from oaspec.errors import CompilerError

_log = logging.getLogger(__name__)


def _has_scheme(name: str) -> bool:
    return urllib.parse.urlsplit(name).scheme != ""


def _is_request_uri(name: str) -> bool:
    """True for absolute URLs and absolute paths, which are used as given."""
    return name.startswith("/") or _has_scheme(name)


def _base_directory(path: str) -> str:
    """Return the directory part of a path, keeping its trailing separator."""
    return path[: len(path) - len(os.path.basename(path))]


class Reader:
    """Loads files and parsed YAML, remembering both for later requests.

    Parsed documents and resolved references share one info cache, keyed by
    file name or by reference.
    """

    def __init__(
        self,
        *,
        verbose: bool = False,
        file_cache_enabled: bool = True,
        info_cache_enabled: bool = True,
    ) -> None:
        self.verbose = verbose
        self.file_cache_enabled = file_cache_enabled
        self.info_cache_enabled = info_cache_enabled
        self.file_cache: dict[str, bytes] = {}
        self.info_cache: dict[str, Optional[yaml.Node]] = {}
        self._lock = threading.RLock()

    def _trace(self, message: str, *args: object) -> None:
        if self.verbose:
            _log.info(message, *args)

    def enable_file_cache(self) -> None:
        """Turn on caching of fetched files."""
        with self._lock:
            self.file_cache_enabled = True

    def disable_file_cache(self) -> None:
        """Turn off caching of fetched files."""
        with self._lock:
            self.file_cache_enabled = False

    def enable_info_cache(self) -> None:
        """Turn on caching of parsed documents."""
        with self._lock:
            self.info_cache_enabled = True

    def disable_info_cache(self) -> None:
        """Turn off caching of parsed documents."""
        with self._lock:
            self.info_cache_enabled = False

    def clear_file_cache(self) -> None:
        """Forget every fetched file."""
        with self._lock:
            self.file_cache = {}

    def clear_info_cache(self) -> None:
        """Forget every parsed document and resolved reference."""
        with self._lock:
            self.info_cache = {}

    def clear_caches(self) -> None:
        """Empty both caches."""
        self.clear_file_cache()
        self.clear_info_cache()

    def remove_from_file_cache(self, fileurl: str) -> None:
        """Drop one fetched file; does nothing while file caching is off."""
        with self._lock:
            if self.file_cache_enabled:
                self.file_cache.pop(fileurl, None)

    def remove_from_info_cache(self, filename: str) -> None:
        """Drop one parsed entry; does nothing while info caching is off."""
        with self._lock:
            if self.info_cache_enabled:
                self.info_cache.pop(filename, None)

    def fetch_file(self, fileurl: str) -> bytes:
        """Download a URL, answering from the cache when possible.

        Raises OSError when the download fails or the status is not 200.
        """
        with self._lock:
            if self.file_cache_enabled:
                cached = self.file_cache.get(fileurl)
                if cached is not None:
                    self._trace("Cache hit %s", fileurl)
                    return cached
                self._trace("Fetching %s", fileurl)
            try:
                with urllib.request.urlopen(fileurl) as response:
                    status = response.status
                    reason = response.reason
                    data = response.read()
            except urllib.error.HTTPError as err:
                raise OSError(
                    f"Error downloading {fileurl}: {err.code} {err.reason}"
                ) from err
            if status != 200:
                raise OSError(f"Error downloading {fileurl}: {status} {reason}")
            if self.file_cache_enabled:
                self.file_cache[fileurl] = data
            return data

    def read_bytes_for_file(self, filename: str) -> bytes:
        """Read a local file, or fetch it if the name is a URL."""
        with self._lock:
            if _has_scheme(filename):
                return self.fetch_file(filename)
            return Path(filename).read_bytes()

    def read_info_from_bytes(
        self, filename: str, data: bytes
    ) -> Optional[yaml.Node]:
        """Parse YAML bytes into a node tree, cached under the file name.

        Raises yaml.YAMLError when the bytes are not valid YAML.
        """
        with self._lock:
            if self.info_cache_enabled:
                if filename in self.info_cache:
                    self._trace("Cache hit info for file %s", filename)
                    return self.info_cache[filename]
                self._trace("Reading info for file %s", filename)
            info = yaml.compose(data)
            if self.info_cache_enabled and filename:
                self.info_cache[filename] = info
            return info

    def read_info_for_ref(self, basefile: str, ref: str) -> Optional[yaml.Node]:
        """Return the node that a $ref points to, relative to a base file.

        Raises CompilerError when the reference cannot be resolved.
        """
        with self._lock:
            if self.info_cache_enabled:
                if ref in self.info_cache:
                    self._trace("Cache hit for ref %s#%s", basefile, ref)
                    return self.info_cache[ref]
                self._trace("Reading info for ref %s#%s", basefile, ref)
            parts = ref.split("#")
            if parts[0]:
                filename = parts[0]
                if not _is_request_uri(filename):
                    filename = _base_directory(basefile) + filename
            else:
                filename = basefile
            data = self.read_bytes_for_file(filename)
            info: Optional[yaml.Node]
            try:
                info = self.read_info_from_bytes(filename, data)
            except yaml.YAMLError as err:
                _log.warning("File error: %s", err)
                info = None
            else:
                if info is None:
                    raise CompilerError(None, f"could not resolve {ref}")
                if len(parts) > 1:
                    for key in parts[1].split("/")[1:]:
                        found: Optional[yaml.Node] = None
                        if isinstance(info, yaml.MappingNode):
                            for item_key, value in info.value:
                                if item_key.value == key:
                                    found = value
                        if found is None:
                            self.info_cache[ref] = None
                            raise CompilerError(None, f"could not resolve {ref}")
                        info = found
            if self.info_cache_enabled:
                self.info_cache[ref] = info
            return info