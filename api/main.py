from typing import Any

from fastapi import FastAPI
from pydantic import BaseModel, Field

from processing.text import normalize_term
from search.config import SearchConfig
from search.pipeline import Doc, build_index, hit_to_dict

app = FastAPI(title="Prefix Search API", version="0.1.0")


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


class DocIn(BaseModel):
    id: str
    content: str


class SearchRequest(BaseModel):
    query: str
    docs: list[DocIn] = []
    per_term: int | None = Field(default=None, ge=1)
    max_results: int | None = Field(default=None, ge=1)


@app.post("/search")
def search(body: SearchRequest) -> dict[str, Any]:
    # fresh index per request; nothing is shared between calls
    base = SearchConfig.from_env()
    cfg = SearchConfig(
        per_term=body.per_term or base.per_term,
        max_results=body.max_results or base.max_results,
    )
    index = build_index((Doc(id=d.id, content=d.content) for d in body.docs), cfg)
    matches = [hit_to_dict(h) for h in index.search(body.query)]
    return {
        "query": body.query,
        "normalized": normalize_term(body.query, cfg.punctuation),
        "count": len(matches),
        "skipped": index.skipped,
        "matches": matches,
    }
