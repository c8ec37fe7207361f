"""HTTP transfer headers: encodings, weighted proposals, Transfer-Encoding and TE."""