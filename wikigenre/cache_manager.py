"""On-disk caching of fetched Wikipedia pages."""

import hashlib
import json
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, Any, Optional


class PageCacheManager:
    """Caches page HTML by URI, one JSON file per page."""

    def __init__(self, cache_dir: str, expiry_days: int = 0) -> None:
        self.cache_dir = Path(cache_dir)
        self.expiry_days = expiry_days
        self.logger = logging.getLogger(__name__)

        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def _get_cache_file(self, uri: str) -> Path:
        uri_hash = hashlib.sha256(uri.encode('utf-8')).hexdigest()
        return self.cache_dir / f"{uri_hash}.json"

    def _is_expired(self, cache_data: Dict[str, Any]) -> bool:
        if self.expiry_days <= 0:
            return False
        cached_time = datetime.fromisoformat(cache_data['timestamp'])
        return datetime.now() - cached_time > timedelta(days=self.expiry_days)

    def get_cached_html(self, uri: str) -> Optional[str]:
        """Get cached HTML for a URI if present and not expired."""
        cache_file = self._get_cache_file(uri)
        if not cache_file.exists():
            self.logger.debug(f"Cache miss: {uri}")
            return None

        try:
            with open(cache_file, 'r', encoding='utf-8') as f:
                cache_data = json.load(f)

            if self._is_expired(cache_data):
                self.logger.debug(f"Cache expired: {uri}")
                cache_file.unlink()
                return None

            self.logger.debug(f"Cache hit: {uri}")
            return cache_data['html']

        except (json.JSONDecodeError, KeyError, ValueError) as e:
            self.logger.warning(f"Corrupted cache file for {uri}: {e}")
            cache_file.unlink()
            return None

    def cache_html(self, uri: str, html: str) -> None:
        cache_file = self._get_cache_file(uri)
        cache_data = {
            'uri': uri,
            'html': html,
            'timestamp': datetime.now().isoformat(),
        }

        try:
            with open(cache_file, 'w', encoding='utf-8') as f:
                json.dump(cache_data, f, ensure_ascii=False)
            self.logger.debug(f"Cached HTML for: {uri}")
        except OSError as e:
            self.logger.error(f"Failed to cache HTML for {uri}: {e}")

    def clear_cache(self) -> int:
        """Remove all cached pages and return how many were removed."""
        cache_files = list(self.cache_dir.glob("*.json"))
        for cache_file in cache_files:
            cache_file.unlink()
        self.logger.info(f"Cleared {len(cache_files)} cache files")
        return len(cache_files)

    def cleanup_expired(self) -> int:
        """Remove expired and corrupted cache files."""
        if self.expiry_days <= 0:
            return 0

        removed_count = 0
        for cache_file in self.cache_dir.glob("*.json"):
            try:
                with open(cache_file, 'r', encoding='utf-8') as f:
                    expired = self._is_expired(json.load(f))
            except (json.JSONDecodeError, KeyError, ValueError):
                expired = True
            if expired:
                cache_file.unlink()
                removed_count += 1

        if removed_count > 0:
            self.logger.info(f"Cleaned up {removed_count} expired cache files")
        return removed_count

    def get_cache_info(self) -> Dict[str, Any]:
        cache_files = list(self.cache_dir.glob("*.json"))
        total_size = sum(f.stat().st_size for f in cache_files)

        expired_count = 0
        for cache_file in cache_files:
            try:
                with open(cache_file, 'r', encoding='utf-8') as f:
                    if self._is_expired(json.load(f)):
                        expired_count += 1
            except (json.JSONDecodeError, KeyError, ValueError):
                expired_count += 1  # Corrupted files count as expired

        return {
            'cache_enabled': True,
            'total_files': len(cache_files),
            'total_size_mb': round(total_size / (1024 * 1024), 2),
            'expired_files': expired_count,
            'cache_dir': str(self.cache_dir),
            'expiry_days': self.expiry_days,
        }
