"""moneyjar - personal finance tracker."""
