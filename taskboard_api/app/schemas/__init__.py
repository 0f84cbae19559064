"""
Pydantic schema definitions.

Each domain (accounts, boards, memberships, todos) defines its stored
entity record, the payloads accepted from clients and the projections
returned to them.  Entity records are frozen: the entity store owns
them and changes are made by storing a modified copy.
"""
