"""Language front-ends that turn source text into classifiable trees."""
