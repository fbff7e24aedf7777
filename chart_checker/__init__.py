"""chart-checker — static verification of inlined chart assets in index.html."""
