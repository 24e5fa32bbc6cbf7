from lispy.reader.parser import TokenStream, atom, parse, parse_all, tokenize
