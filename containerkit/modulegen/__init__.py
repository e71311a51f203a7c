"""Describing new container examples and modules and registering them in the documentation and dependabot configurations."""