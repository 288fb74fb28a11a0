"""Cross-cutting helpers shared by the domain apps."""
