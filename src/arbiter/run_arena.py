from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin

import httpx

from arbiter.analyze import extract_title
from arbiter.samples import ArenaConfig, Sample, load_config
from arbiter.score import Arbiter, EvaluationResult
from arbiter.store import Store


def _repo_root() -> Path:
    # .../src/arbiter/run_arena.py -> parents[2] = repo root
    return Path(__file__).resolve().parents[2]


async def load_document(
    client: httpx.AsyncClient, cfg: ArenaConfig, sample: Sample
) -> tuple[str, Optional[int], str]:
    """
    Returns (text, status_code, source).
    status_code is None for samples read from disk.
    """
    if cfg.base_url:
        url = urljoin(cfg.base_url, sample.filename)
        r = await client.get(url, follow_redirects=True)
        r.raise_for_status()
        return r.text, r.status_code, url

    if cfg.samples_dir is None:
        raise ValueError("Config needs either base_url or samples_dir")

    path = cfg.samples_dir / sample.filename
    return path.read_text(encoding="utf-8"), None, str(path)


async def judge_sample(
    client: httpx.AsyncClient,
    store: Store,
    arbiter: Arbiter,
    cfg: ArenaConfig,
    sample: Sample,
) -> Optional[EvaluationResult]:
    try:
        text, status, source = await load_document(client, cfg, sample)
    except httpx.HTTPStatusError as e:
        store.log_load(sample.filename, str(e.request.url), e.response.status_code, f"http_{e.response.status_code}")
        print(f"Failed to load {sample.filename}: HTTP {e.response.status_code}")
        return None
    except (httpx.HTTPError, OSError, UnicodeDecodeError) as e:
        store.log_load(sample.filename, None, None, f"load_failed:{type(e).__name__}:{e}")
        print(f"Failed to load {sample.filename}: {e}")
        return None

    store.log_load(sample.filename, source, status, None)

    result = arbiter.evaluate(text)
    store.upsert_result(
        filename=sample.filename,
        label=sample.label,
        title=extract_title(text),
        source=source,
        result=result,
        doc_length=len(text),
    )
    return result


async def run(
    cfg: ArenaConfig,
    store: Store,
    arbiter: Optional[Arbiter] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> int:
    """Judge every sample in order. Returns how many samples were loaded."""
    arbiter = arbiter or Arbiter()

    own_client = client is None
    if own_client:
        client = httpx.AsyncClient(
            timeout=httpx.Timeout(cfg.timeout_seconds),
            headers={"User-Agent": cfg.user_agent},
        )

    loaded = 0
    try:
        for i, sample in enumerate(cfg.samples, 1):
            result = await judge_sample(client, store, arbiter, cfg, sample)
            if result is None:
                continue
            loaded += 1
            print(f"[{i}/{len(cfg.samples)}] {sample.label}: {result.total}")
    finally:
        if own_client:
            await client.aclose()

    if loaded == 0:
        print("No samples loaded.")
        print("Serve the samples over HTTP (set base_url) or check that they exist in samples_dir.")

    return loaded


async def main() -> None:
    root = _repo_root()
    config_path = root / "src" / "configs" / "samples.yaml"
    db_path = root / "src" / "data" / "arena.sqlite"

    cfg = load_config(config_path)
    store = Store(str(db_path))

    loaded = await run(cfg, store)
    print(f"Done. Judged {loaded}/{len(cfg.samples)} samples into {db_path}")


if __name__ == "__main__":
    asyncio.run(main())
