#!/usr/bin/env python
import rdio_auth

if __name__ == '__main__':
    rdio_auth.main()
