"""
Service layer.

``QueryService`` answers reads and projections; the remaining services
perform writes, including their side effects (bootstrap memberships,
cascading deletes, timestamp refresh).  Every service is constructed
with the ``EntityStore`` it operates on.
"""
