#!/usr/bin/env python

import timeit
from setuptools import setup, Command

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(0, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        S1 = "from panda import Exchange, stretch"
        S2 = "stretch.TESTING = True"
        S3 = "b = Exchange(b'password', b'msg-b'); tb, mb = b.next_request()"
        S4 = "a = Exchange(b'password', b'msg-a')"
        S5 = "ta, ma = a.next_request()"
        S6 = "a.process(mb)"

        # scrypt dominates everything else, so time the rest without it
        scrypt = do([S1], "stretch.stretch_secret(b'password')")
        start = do([S1, S2], ";".join([S4, S5]))
        full = do([S1, S2, S3], ";".join([S4, S5, S6, S5]))
        print("scrypt=%6s, start=%6s, round one=%6s"
              % (abbrev(scrypt), abbrev(start), abbrev(full)))
cmdclass = {"speed": Speed}

setup(name="panda",
      version="0.1.0",
      description="PANDA asynchronous shared-secret message exchange (SPAKE2 + secretbox)",
      package_dir={"": "src"},
      packages=["panda", "panda.test"],
      license="MIT",
      cmdclass=cmdclass,
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      python_requires=">=3.8",
      install_requires=["PyNaCl"],
      )
