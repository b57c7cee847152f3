from __future__ import annotations

import random
from typing import Any, Dict, Optional

import structlog

from .errors import InvalidSchemaError, SchemaDepthExceededError
from .leaves import get_example_from_item, is_plain_mapping, node_field

logger = structlog.get_logger(__name__)

HIDDEN_PREFIX = '__'
SELF_REL = 'self'


def merge_examples(base: Any, update: Any) -> Dict[str, Any]:
    """Return a new mapping with `update` written over `base`.

    Non-mapping values on either side contribute nothing to the result.
    """
    merged: Dict[str, Any] = dict(base) if is_plain_mapping(base) else {}
    if is_plain_mapping(update):
        merged.update(update)
    return merged


def merge_into_example(example: Any, update: Any) -> Any:
    """Merge generated fields into a property example.

    An unset example starts from an empty mapping; an author-supplied scalar
    or list example is kept as is.
    """
    if example is None or is_plain_mapping(example):
        return merge_examples(example, update)
    return example


def _first(candidates: Any) -> Any:
    if isinstance(candidates, (list, tuple)) and candidates:
        return candidates[0]
    return None


class ExampleDataExtractor:
    """Build example data from a JSON-Schema-like document.

    Every leaf is replaced by its `example`, its `default`, or a placeholder,
    while `properties`, `items`, `allOf`/`oneOf`/`anyOf` and `rel: "self"`
    are walked recursively. Self references resolve against the nearest node
    (inclusive) that declares an `id`, or the top-level document otherwise.

    Cyclic schemas recurse until Python raises `RecursionError` unless
    `max_depth` is set, in which case `SchemaDepthExceededError` is raised
    once nesting goes deeper than the limit.
    """

    def __init__(
        self,
        preserve_case: bool = False,
        max_depth: Optional[int] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        self.preserve_case = preserve_case
        self.max_depth = max_depth
        self._random = rng if rng is not None else random.Random(seed)

    @classmethod
    def from_settings(cls, settings) -> 'ExampleDataExtractor':
        return cls(
            preserve_case=settings.preserve_case,
            max_depth=settings.max_depth,
            seed=settings.seed,
        )

    def extract(self, component: Any, root: Any = None) -> Any:
        """Build an example value for `component`.

        `root` is the schema used to resolve `rel: "self"`; it defaults to
        `component` itself.
        """
        if root is None:
            root = component
        return self._extract(component, root, 0)

    def map_properties_to_examples(self, props: Any, schema: Any) -> Dict[str, Any]:
        """Map a `properties` definition to example values.

        `{'name': {'type': 'string', 'example': 'Ada'}}` -> `{'name': 'Ada'}`
        """
        return self._map_properties(props, schema, 0)

    def _extract(self, component: Any, root: Any, depth: int) -> Any:
        if component is None or (not is_plain_mapping(component) and not component):
            raise InvalidSchemaError('No schema received to generate example data')
        if self.max_depth is not None and depth > self.max_depth:
            raise SchemaDepthExceededError(self.max_depth)
        if not is_plain_mapping(component):
            return {}

        # A node with an id becomes the scope for its own self references.
        if component.get('id'):
            root = component

        # Arrays skip combinators and properties entirely.
        if component.get('type') == 'array':
            count = self._pick_length(component)
            items = component.get('items')
            return [self._extract(items, root, depth + 1) for _ in range(count)]

        reduced: Dict[str, Any] = {}
        if component.get('allOf') is not None:
            for subschema in component['allOf']:
                reduced = merge_examples(reduced, self._extract(subschema, root, depth + 1))
        elif component.get('oneOf') is not None:
            reduced = self._extract(_first(component['oneOf']), root, depth + 1)
        elif component.get('anyOf') is not None:
            reduced = self._extract(_first(component['anyOf']), root, depth + 1)
        elif component.get('rel') == SELF_REL:
            reduced = self._extract(root, root, depth + 1)

        if component.get('properties') is not None:
            reduced = merge_examples(
                reduced, self._map_properties(component['properties'], root, depth)
            )
        return reduced

    def _map_properties(self, props: Any, schema: Any, depth: int) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        if not is_plain_mapping(props):
            return properties

        for prop_name, prop_config in props.items():
            # Opt-out of example generation
            if str(prop_name).startswith(HIDDEN_PREFIX) or node_field(prop_config, 'private'):
                continue

            example = get_example_from_item(prop_config)
            items = node_field(prop_config, 'items')

            if node_field(prop_config, 'rel') == SELF_REL:
                example = self._extract(schema, schema, depth + 1)
            elif node_field(prop_config, 'type') == 'array' and items is not None and example is None:
                if is_plain_mapping(items) and 'example' in items:
                    example = [items['example']]
                else:
                    example = [self._extract(items, schema, depth + 1)]
            elif node_field(prop_config, 'id') and example is None:
                example = self._extract(prop_config, prop_config, depth + 1)
            else:
                if node_field(prop_config, 'oneOf') is not None or node_field(prop_config, 'anyOf') is not None:
                    example = self._extract(prop_config, schema, depth + 1)
                elif node_field(prop_config, 'allOf') is not None:
                    base = example if example is not None else {}
                    for subschema in prop_config['allOf']:
                        base = merge_into_example(base, self._extract(subschema, schema, depth + 1))
                    example = base
                if node_field(prop_config, 'properties') is not None:
                    example = merge_into_example(
                        example, self._map_properties(prop_config['properties'], schema, depth + 1)
                    )

            # Schemas declare data ids as "ID" so the parser does not read them
            # as schema identifiers.
            key = 'id' if prop_name == 'ID' and not self.preserve_case else prop_name
            properties[key] = example
        return properties

    def _pick_length(self, component: Dict[str, Any]) -> int:
        min_items = int(component.get('minItems') or 1)
        max_items = int(component.get('maxItems') or 1)
        if min_items > max_items:
            logger.warning('array_bounds_swapped', min_items=min_items, max_items=max_items)
            min_items, max_items = max_items, min_items
        count = self._random.randint(min_items, max_items)
        logger.debug('array_length_chosen', count=count, min_items=min_items, max_items=max_items)
        return count


default_extractor = ExampleDataExtractor()


def extract(component: Any, root: Any = None) -> Any:
    """Build an example value with the shared default extractor."""
    return default_extractor.extract(component, root)


def map_properties_to_examples(props: Any, schema: Any) -> Dict[str, Any]:
    return default_extractor.map_properties_to_examples(props, schema)
