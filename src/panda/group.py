from .util import size_bits, size_bytes, unbiased_randrange

"""The multiplicative group in which we run SPAKE2.

Elements are plain ints in Zp*. The group is described by three public
values: the modulus p, a generator g, and a masking element N that both
sides multiply into their public values, raised to a password-derived
exponent. Nobody may know the discrete log of N relative to g: anyone who did
could mount an active attack against every exchange.

    x = MODP4096.random_exponent(entropy_f)
    X = MODP4096.exp(MODP4096.g, x)
    MODP4096.is_valid_element(X)  # 0 < X < p
"""

class ModPGroup:
    def __init__(self, p, g, N):
        # these are the public system parameters
        self.p = p # the field size
        self.g = g # generator
        self.N = N # masking element, verifiably random
        self.element_size_bits = size_bits(self.p)
        self.element_size_bytes = size_bytes(self.p)

        assert 1 < self.g < self.p
        assert self.is_valid_element(self.N)

    def random_exponent(self, entropy_f):
        while True:
            x = unbiased_randrange(0, self.p, entropy_f)
            assert 0 <= x < self.p, "random exponent out of range"
            if x > 0:
                return x

    def is_valid_element(self, e):
        # Zp* excludes 0, and anything at or past p is not reduced
        return 0 < e < self.p

    def exp(self, base, e):
        return pow(base, e, self.p)

    def mul(self, a, b):
        return (a * b) % self.p

    def inverse(self, e):
        return pow(e, -1, self.p)


# p and g come from the 4096-bit MODP group in RFC 3526, section 5:
# https://tools.ietf.org/html/rfc3526#section-5
#
# N was generated by taking 4096 bits of Salsa20 output with a zero nonce,
# keyed with SHA-256("PANDA key exchange, seed for N").
MODP4096 = ModPGroup(
    p=0xFFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7EDEE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3BE39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF6955817183995497CEA956AE515D2261898FA051015728E5A8AAAC42DAD33170D04507A33A85521ABDF1CBA64ECFB850458DBEF0A8AEA71575D060C7DB3970F85A6E1E4C7ABF5AE8CDB0933D71E8C94E04A25619DCEE3D2261AD2EE6BF12FFA06D98A0864D87602733EC86A64521F2B18177B200CBBE117577A615D6C770988C0BAD946E208E24FA074E5AB3143DB5BFCE0FD108E4B82D120A92108011A723C12A787E6D788719A10BDBA5B2699C327186AF4E23C1A946834B6150BDA2583E9CA2AD44CE8DBBBC2DB04DE8EF92E8EFC141FBECAA6287C59474E6BC05D99B2964FA090C3A2233BA186515BE7ED1F612970CEE2D7AFB81BDD762170481CD0069127D5B05AA993B4EA988D8FDDC186FFB7DC90A6C08F4DF435C934063199FFFFFFFFFFFFFFFF,
    g=2,
    N=0xa4fc1dc7a9a7fb350cbe7ca8301e69be1b0a7d904214218dcb055aa5a43f5d5eafed84f570fb13532075ada5aa2aa3cd52b84f3dcadcccc99f22cbcf8666eb768bbe7adda90709d73011d8474d6e4d458a5e0c9f61bce08b76f86707702787814b122b6f51352dfd69a5da48def271f814b09116e200b01e5acfc66f666f8268447eb0ec2aac64a97093f09908653f93c5723d38e404f0f01b46799b5ef398dd4bd9e4301d704dd22d2bc4de8fed055be9992b147ac686364d80dcd5153ea6e9fdb85a65d78fc70ce816f2fc964d270affe1cb5267fad6bd17ad1994de8854f6c68d1347db7c65250196fddbf0ebbea9e2c4ab2f82bc4784f3d36881bab1b5b05ebf1a758d24a7db1f2030607349bc0e961e82e1ca9301bd3fa1ce32364a1febf5bc9915aa364bf1c1ac62e066022cb9828fb39becf77dcb3d0b1db35ecfdf7cf91c381b355b74175b5fb2918008ad775132fb3886333449dfc55bb65417c2a0c45559370f66d0e955d1c28e46f7274639b039736546c502470513a1e36a793f888ce880b3fe00e83018049749fc4870cefbbb9a9a6e10f90a78cd0de85360f7b0d7abaab43d99d539b48afb56e36c8538c03faf43320324c76741d8c7ea419dea6de120bdbb93402284436645cc4b4d4190ee0313dc2302b31cb4eb55cb4c4d779b56ca9b91423a43b50868c5211caf9491f36b77abb0e29f98639ef6592e77,
    )
