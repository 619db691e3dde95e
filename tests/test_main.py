import main


def test_run_serves_app_from_environment(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.delenv("RELOAD", raising=False)

    main.run()

    assert calls == [("main:app", {"host": "127.0.0.1", "port": 9001, "reload": False})]
