"""Plugin host extensions such as tempo and note sync for vocal synths."""