def test_imports():
    import trace_annotator
    import trace_annotator.annotate
    import trace_annotator.cli
    import trace_annotator.config
    import trace_annotator.logging
    import trace_annotator.services.example_service
    import trace_annotator.ui

    assert trace_annotator.__version__
