from arbiter.score import evaluate
from arbiter.store import Store


def _store(tmp_path):
    return Store(str(tmp_path / "data" / "arena.sqlite"))


def test_upsert_and_get_result(tmp_path):
    store = _store(tmp_path)
    doc = "<!DOCTYPE html><body></body>"
    result = evaluate(doc)

    store.upsert_result(
        filename="file1.html",
        label="Sample #1",
        title=None,
        source="samples/file1.html",
        result=result,
        doc_length=len(doc),
    )

    row = store.get_result("file1.html")
    assert row["label"] == "Sample #1"
    assert row["total"] == 53
    assert (row["markup"], row["style"], row["script"]) == (60, 50, 50)
    assert row["badge"] == "bronze"
    assert row["doc_length"] == len(doc)
    assert row["feedback"] == [{"kind": "positive", "message": "HTML: Doctype declared correctly."}]
    assert store.get_result("missing.html") is None
    store.close()


def test_upsert_replaces_previous_result(tmp_path):
    store = _store(tmp_path)
    for doc in ("<p>old</p>", "<!DOCTYPE html><body></body>"):
        store.upsert_result(
            filename="file1.html",
            label="Sample #1",
            title=None,
            source=None,
            result=evaluate(doc),
            doc_length=len(doc),
        )

    rows = store.get_results()
    assert len(rows) == 1
    assert rows[0]["total"] == 53
    store.close()


def test_get_results_orders_by_total(tmp_path):
    store = _store(tmp_path)
    docs = {
        "b.html": "<p>plain</p>",
        "a.html": "<p>plain too</p>",
        "c.html": "<!DOCTYPE html><main></main>",
    }
    for name, doc in docs.items():
        store.upsert_result(
            filename=name, label=name, title=None, source=None, result=evaluate(doc), doc_length=len(doc)
        )

    assert [r["filename"] for r in store.get_results()] == ["c.html", "a.html", "b.html"]
    store.close()


def test_load_log_errors(tmp_path):
    store = _store(tmp_path)
    store.log_load("a.html", "http://x/a.html", 200, None)
    store.log_load("b.html", "http://x/b.html", 404, "http_404")
    store.log_load("c.html", "http://x/c.html", 404, "http_404")
    store.log_load("d.html", None, None, "load_failed:ConnectError:boom")

    assert store.load_errors() == [("http_404", 2), ("load_failed:ConnectError:boom", 1)]
    store.close()
