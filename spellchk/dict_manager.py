"""
Dictionary management: list, download, update, inspect and build
dictionaries in the data directory.
"""

import random
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

import requests

from config_logging import get_logger, DictionaryError, FileError, ValidationError

from .dictionary import DICT_SUFFIX, Dictionary, dictionary_path

logger = get_logger('dict_manager')

WORDLIST_URL = (
    "https://raw.githubusercontent.com/dwyl/english-words/"
    "6e4bc58ad764c3e6df8b5be4048671962c9d6a23/words_alpha.txt"
)
WORDLIST_VERSION = "2023.12"
SUPPORTED_LANGUAGES = {
    'en_US': WORDLIST_URL,
    'en_GB': WORDLIST_URL,
}
DOWNLOAD_TIMEOUT = 60
MAX_RETRIES = 3


def _clean_words(lines: Iterable[str]) -> List[str]:
    """Lowercase a raw word list and drop blank and single-letter entries."""
    words = []
    for line in lines:
        word = line.strip().lower()
        if len(word) > 1:
            words.append(word)
    return words


def list_dictionaries(data_dir: Union[str, Path]) -> List[Dict[str, Any]]:
    """Dictionaries installed in ``data_dir``, sorted by language."""
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        return []

    installed = []
    for path in sorted(data_dir.glob(f"*{DICT_SUFFIX}")):
        installed.append({
            'language': path.stem,
            'path': str(path),
            'size': path.stat().st_size,
        })
    return installed


def fetch_wordlist(url: str, timeout: int = DOWNLOAD_TIMEOUT,
                   max_retries: int = MAX_RETRIES) -> str:
    """
    Download a word list, retrying timeouts and connection failures with
    exponential backoff.

    Raises:
        DictionaryError: HTTP error or retries exhausted
    """
    for attempt in range(max_retries):
        try:
            response = requests.get(url, timeout=timeout)
            response.raise_for_status()
            return response.text
        except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
            if attempt < max_retries - 1:
                wait_time = (2 ** attempt) + (random.random() * 0.1)
                logger.warning("Download failed, retrying", url=url, attempt=attempt + 1,
                               wait_seconds=round(wait_time, 2), error=str(e))
                time.sleep(wait_time)
            else:
                raise DictionaryError(f"Download failed after {max_retries} attempts: {e}",
                                      url=url)
        except requests.RequestException as e:
            raise DictionaryError(f"Download failed: {e}", url=url)

    raise DictionaryError("Download failed", url=url)


def download_dictionary(language: str, data_dir: Union[str, Path]) -> Dict[str, Any]:
    """
    Download the word list for ``language`` and build its dictionary.

    Raises:
        ValidationError: language has no downloadable word list
        DictionaryError: download or build failed
    """
    url = SUPPORTED_LANGUAGES.get(language)
    if url is None:
        raise ValidationError(
            f"No downloadable word list for '{language}' "
            f"(supported: {', '.join(sorted(SUPPORTED_LANGUAGES))})",
            field='language'
        )

    with logger.log_operation("download_dictionary", language=language, url=url):
        words = _clean_words(fetch_wordlist(url).splitlines())
        destination = dictionary_path(language, data_dir)
        count = Dictionary.build_from_words(words, destination)

    return {
        'language': language,
        'path': str(destination),
        'word_count': count,
        'version': WORDLIST_VERSION,
    }


def update_dictionaries(data_dir: Union[str, Path]) -> List[Dict[str, Any]]:
    """Re-download every installed dictionary that has a known word list source."""
    updated = []
    for entry in list_dictionaries(data_dir):
        if entry['language'] not in SUPPORTED_LANGUAGES:
            logger.info("No download source, skipping", language=entry['language'])
            continue
        updated.append(download_dictionary(entry['language'], data_dir))
    return updated


def show_info(language: str, data_dir: Union[str, Path]) -> Dict[str, Any]:
    """
    Path, size and word count of an installed dictionary.

    Raises:
        DictionaryError: dictionary not installed or corrupt
    """
    path = dictionary_path(language, data_dir)
    if not path.exists():
        raise DictionaryError(f"Dictionary '{language}' is not installed", language=language,
                              path=str(path))

    dictionary = Dictionary.load_from_path(path)
    return {
        'language': language,
        'path': str(path),
        'size': path.stat().st_size,
        'word_count': dictionary.word_count,
    }


def build_dictionary(language: str, wordlist_path: Union[str, Path],
                     data_dir: Union[str, Path]) -> Dict[str, Any]:
    """Build ``<language>.dict`` from a local word list, one word per line."""
    wordlist_path = Path(wordlist_path)
    try:
        text = wordlist_path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"Cannot read word list {wordlist_path}: {e}",
                        filename=str(wordlist_path))

    destination = dictionary_path(language, data_dir)
    count = Dictionary.build_from_words(_clean_words(text.splitlines()), destination)
    return {
        'language': language,
        'path': str(destination),
        'word_count': count,
    }
