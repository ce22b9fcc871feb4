"""Calendar module — day sequences and holiday classification."""
