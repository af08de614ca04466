"""Shared test fixtures for graphql-depth-limit tests."""

from __future__ import annotations

import pytest
import strawberry
from graphql import GraphQLSchema, build_schema


# ─── Sample queries ───────────────────────────────────────────────────────────

VALID_QUERY = """
query Valid {
    field0 {
        field1 {
            field2 {
                end
            }
        }
    }
}
"""

DEEP_QUERY = """
query Valid {
    field0 {
        field1 {
            field2 {
                field3 {
                    field4 {
                        field5 {
                            end
                        }
                    }
                }
            }
        }
    }
}
"""

SHALLOW_QUERY = """
query Valid {
    field0 {
        end
    }
}
"""

INTROSPECTION_QUERY = """
query IntrospectionQuery {
  __schema {
    queryType { name }
    mutationType { name }
    subscriptionType { name }
    types { ...FullType }
    directives {
      name
      description
      locations
      args { ...InputValue }
    }
  }
}

fragment FullType on __Type {
  kind
  name
  description
  fields(includeDeprecated: true) {
    name
    description
    args { ...InputValue }
    type { ...TypeRef }
    isDeprecated
    deprecationReason
  }
  inputFields { ...InputValue }
  interfaces { ...TypeRef }
  enumValues(includeDeprecated: true) {
    name
    description
    isDeprecated
    deprecationReason
  }
  possibleTypes { ...TypeRef }
}

fragment InputValue on __InputValue {
  name
  description
  type { ...TypeRef }
  defaultValue
}

fragment TypeRef on __Type {
  kind
  name
  ofType {
    kind
    name
    ofType {
      kind
      name
      ofType {
        kind
        name
        ofType {
          kind
          name
          ofType {
            kind
            name
            ofType {
              kind
              name
              ofType {
                kind
                name
              }
            }
          }
        }
      }
    }
  }
}
"""


# ─── Schemas ──────────────────────────────────────────────────────────────────

SDL = """
type Object5 { end: Int }
type Object4 { field5: Object5 end: Int }
type Object3 { field4: Object4 end: Int }
type Object2 { field3: Object3 end: Int }
type Object1 { field2: Object2 end: Int }
type Object0 { field1: Object1 end: Int }
type Query { field0: Object0 }
"""


@strawberry.type
class Object5:
    end: int = 0


@strawberry.type
class Object4:
    end: int = 0

    @strawberry.field
    def field5(self) -> Object5:
        return Object5()


@strawberry.type
class Object3:
    end: int = 0

    @strawberry.field
    def field4(self) -> Object4:
        return Object4()


@strawberry.type
class Object2:
    end: int = 0

    @strawberry.field
    def field3(self) -> Object3:
        return Object3()


@strawberry.type
class Object1:
    end: int = 0

    @strawberry.field
    def field2(self) -> Object2:
        return Object2()


@strawberry.type
class Object0:
    end: int = 0

    @strawberry.field
    def field1(self) -> Object1:
        return Object1()


@strawberry.type
class Query:
    @strawberry.field
    def field0(self) -> Object0:
        return Object0()


# ─── Fixtures ─────────────────────────────────────────────────────────────────

@pytest.fixture
def sdl_schema() -> GraphQLSchema:
    return build_schema(SDL)


@pytest.fixture(autouse=True)
def _clean_depth_limit_env(monkeypatch):
    for var in (
        "DEPTH_LIMIT_MAX_DEPTH",
        "DEPTH_LIMIT_IGNORE_EXACT",
        "DEPTH_LIMIT_IGNORE_PATTERN",
        "DEPTH_LIMIT_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


def make_schema(*extension_factories) -> strawberry.Schema:
    return strawberry.Schema(query=Query, extensions=list(extension_factories))
