"""Document event pipeline.

Adapts the segment filter to a stream of document events: text runs are
split into plain text and rendered ruby, all other events pass through.
"""
