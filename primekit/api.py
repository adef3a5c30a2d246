"""The public API for primekit."""

from primekit import egcd as egcd_lib
from primekit import miller_rabin as miller_rabin_lib
from primekit import modinverse
from primekit import parameters
from primekit import primes
from primekit import random_source

egcd = egcd_lib.egcd
mod_inverse = modinverse.mod_inverse
checked_mod_inverse = modinverse.checked_mod_inverse
miller_rabin = miller_rabin_lib.miller_rabin
is_probably_prime = primes.is_probably_prime
is_probably_prime_unsigned = primes.is_probably_prime_unsigned

NoInverseError = modinverse.NoInverseError
RandomSourceError = random_source.RandomSourceError
PrimalityParameters = parameters.PrimalityParameters
