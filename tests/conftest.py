"""Configuração do pytest para o contact relay."""

import sys
from pathlib import Path

# Adiciona src/ e a raiz ao PYTHONPATH para imports absolutos (incluindo tests.fakes)
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
