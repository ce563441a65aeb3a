"""Stub component source for a resolved Figma node.

Templates only use the component and node names; visual properties are not parsed.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

COMPONENT_FORMATS = ("react", "swift", "web-component", "vue", "angular", "svelte")
DEFAULT_COMPONENT_FORMAT = "react"


@dataclass(frozen=True)
class GeneratedCode:
    component_name: str
    node_name: str
    format: str
    language: str
    code: str


def component_name_from(node_name: str) -> str:
    """Strip everything but ASCII letters and digits."""
    return re.sub(r"[^a-zA-Z0-9]", "", node_name)


def kebab_case(name: str) -> str:
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", name)
    name = re.sub(r"([A-Z])([A-Z])(?=[a-z])", r"\1-\2", name)
    return name.lower()


def _react(name: str, node_name: str) -> str:
    css_class = name.lower()
    return f"""import React from 'react';
import './styles/{name}.css';

export const {name} = ({{ children, ...props }}) => {{
  return (
    <div className="{css_class}" {{...props}}>
      {{/* Generated from Figma node: {node_name} */}}
      <h2>Component Content</h2>
      {{children}}
    </div>
  );
}};

export default {name};
"""


def _swift(name: str, node_name: str) -> str:
    return f"""import SwiftUI

struct {name}: View {{
    // MARK: - Properties
    var title: String = "Component Content"

    // MARK: - Body
    var body: some View {{
        VStack(alignment: .leading, spacing: 16) {{
            // Generated from Figma node: {node_name}
            Text(title)
                .font(.headline)
                .foregroundColor(.primary)
        }}
        .padding()
        .background(Color(.systemBackground))
        .cornerRadius(8)
        .shadow(radius: 2)
    }}
}}

// MARK: - Preview
struct {name}_Previews: PreviewProvider {{
    static var previews: some View {{
        {name}()
    }}
}}
"""


def _web_component(name: str, node_name: str) -> str:
    tag = kebab_case(name)
    return f"""class {name} extends HTMLElement {{
  constructor() {{
    super();
    this.attachShadow({{ mode: 'open' }});
  }}

  connectedCallback() {{
    this.render();
  }}

  render() {{
    // Generated from Figma node: {node_name}
    this.shadowRoot.innerHTML = `
      <style>
        :host {{
          display: block;
          font-family: sans-serif;
          padding: 16px;
          border-radius: 8px;
          box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
        }}
        h2 {{
          margin-top: 0;
          color: #333;
        }}
      </style>
      <div class="{tag}">
        <h2>Component Content</h2>
        <slot></slot>
      </div>
    `;
  }}
}}

// Register the custom element
customElements.define('{tag}', {name});
"""


def _vue(name: str, node_name: str) -> str:
    css_class = name.lower()
    return f"""<template>
  <div class="{css_class}">
    <!-- Generated from Figma node: {node_name} -->
    <h2>Component Content</h2>
    <slot></slot>
  </div>
</template>

<script>
export default {{
  name: '{name}',
  props: {{
    // Define props here
  }},
  data() {{
    return {{
      // Component state
    }}
  }},
  methods: {{
    // Component methods
  }}
}}
</script>

<style scoped>
.{css_class} {{
  padding: 16px;
  border-radius: 8px;
  box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
}}
</style>
"""


def _angular(name: str, node_name: str) -> str:
    tag = kebab_case(name)
    return f"""import {{ Component, Input }} from '@angular/core';

@Component({{
  selector: 'app-{tag}',
  template: `
    <div class="{tag}">
      <!-- Generated from Figma node: {node_name} -->
      <h2>Component Content</h2>
      <ng-content></ng-content>
    </div>
  `,
  styles: [`
    .{tag} {{
      padding: 16px;
      border-radius: 8px;
      box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
    }}
  `]
}})
export class {name}Component {{
  // Component inputs
  @Input() title: string = 'Component Content';

  // Component logic
  constructor() {{ }}
}}
"""


def _svelte(name: str, node_name: str) -> str:
    css_class = name.lower()
    return f"""<script>
  // Generated from Figma node: {node_name}
  export let title = 'Component Content';
</script>

<div class="{css_class}">
  <h2>{{title}}</h2>
  <slot></slot>
</div>

<style>
  .{css_class} {{
    padding: 16px;
    border-radius: 8px;
    box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
  }}
</style>
"""


_TEMPLATES: dict[str, tuple[str, Callable[[str, str], str]]] = {
    "react": ("jsx", _react),
    "swift": ("swift", _swift),
    "web-component": ("javascript", _web_component),
    "vue": ("vue", _vue),
    "angular": ("typescript", _angular),
    "svelte": ("svelte", _svelte),
}


def generate_component_code(component_name: str, node_name: str, fmt: str = DEFAULT_COMPONENT_FORMAT) -> GeneratedCode:
    """Render a stub component. Unknown formats fall back to React."""
    language, template = _TEMPLATES.get(fmt, _TEMPLATES[DEFAULT_COMPONENT_FORMAT])
    return GeneratedCode(
        component_name=component_name,
        node_name=node_name,
        format=fmt,
        language=language,
        code=template(component_name, node_name),
    )
